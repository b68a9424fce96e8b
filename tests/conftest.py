import os

import pytest
from fastapi.testclient import TestClient

# Keep a PORT from the shell out of the settings tests
os.environ.pop("PORT", None)


@pytest.fixture
def client():
    from app.main import app

    with TestClient(app) as c:
        yield c
