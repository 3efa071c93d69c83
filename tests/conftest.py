import copy
import os
from typing import Any, Callable, Dict

import pytest

# tests/conftest.py

# Keep test output quiet unless a test opts in
os.environ.setdefault("SHARED_CONTRACTS_LOG_LEVEL", "WARNING")

from shared_contracts import default_registry
from shared_contracts.payloads import EXAMPLE_PAYLOADS


@pytest.fixture(scope="session")
def registry():
    """The process-wide registry built at import."""
    return default_registry


@pytest.fixture
def example() -> Callable[[str], Dict[str, Any]]:
    """
    Return a helper that hands out a mutable copy of a named example payload.
    Usage: data = example("createOrderRequest")
    """
    def _make(name: str) -> Dict[str, Any]:
        return copy.deepcopy(EXAMPLE_PAYLOADS[name])
    return _make


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    """
    Keep logging settings stable across tests; individual tests can still
    monkeypatch their own values.
    """
    monkeypatch.setenv("SHARED_CONTRACTS_LOG_LEVEL", os.environ.get("SHARED_CONTRACTS_LOG_LEVEL", "WARNING"))
    monkeypatch.delenv("SHARED_CONTRACTS_LOG_DIR", raising=False)
    yield
