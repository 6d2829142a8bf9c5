import sys
from pathlib import Path
from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path so 'profile_api' is importable during tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

FACT_URL = "https://catfact.test/fact"


@pytest.fixture()
def settings():
    from profile_api.infrastructure.config import Settings

    return Settings(cat_fact_api_url=FACT_URL)


@pytest.fixture()
def fact_client_for():
    """Build a CatFactClient whose upstream is answered by ``handler``."""
    from profile_api.infrastructure.facts.cat_fact_client import CatFactClient

    def build(handler: Callable[[httpx.Request], httpx.Response]) -> CatFactClient:
        return CatFactClient(url=FACT_URL, timeout=20.0, transport=httpx.MockTransport(handler))

    return build


@pytest.fixture()
def client_for(settings, fact_client_for):
    """Build a TestClient for an app whose cat fact upstream is ``handler``."""
    # lazy import so env-driven defaults are not read at collection time
    from profile_api.main import create_app

    def build(handler: Callable[[httpx.Request], httpx.Response]) -> TestClient:
        return TestClient(create_app(settings, fact_client_for(handler)))

    return build
