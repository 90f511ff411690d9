import sys
from pathlib import Path

import pytest

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))


@pytest.fixture
def client():
    """TestClient over a freshly seeded app, so tests never share books."""
    from fastapi.testclient import TestClient

    from api.main import create_app

    return TestClient(create_app())
