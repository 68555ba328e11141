import os
import sys

import pytest

# Ensure the project root is on the import path for tests
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

# Bound at import time; tests may monkeypatch the module attribute.
from logic.llm_client import _get_openai_client as _cached_openai_client  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    for name in ("OPENAI_API_KEY", "OPENAI_MODEL", "TICKET_STORE_URL", "TICKET_STORE_KEY"):
        monkeypatch.delenv(name, raising=False)

    _cached_openai_client.cache_clear()
    yield
    _cached_openai_client.cache_clear()
