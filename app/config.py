from pydantic import field_validator
from pydantic_settings import BaseSettings

DEFAULT_PORT = "3000"
LISTEN_HOST = "0.0.0.0"


class Settings(BaseSettings):
    # Only the PORT environment variable; no .env file
    port: str = DEFAULT_PORT

    @field_validator("port", mode="before")
    @classmethod
    def default_empty_port(cls, value):
        if value is None or str(value).strip() == "":
            return DEFAULT_PORT
        return str(value).strip()

    @property
    def listen_port(self) -> int:
        return int(self.port)

    @property
    def address(self) -> str:
        return f":{self.port}"


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()
