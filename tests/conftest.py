import pytest  # type: ignore[import]

from opentelemetry.util.zipkin import registry


@pytest.fixture(autouse=True)
def _isolate_registry(monkeypatch):
    # Keep installed entry points and test registrations out of other tests.
    monkeypatch.setattr(registry, "entry_points", lambda **kwargs: [])
    monkeypatch.setattr(registry, "_ENTRY_POINTS_LOADED", False)
    monkeypatch.setattr(registry, "_FACTORIES", dict(registry._FACTORIES))
    yield


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all OTEL_ZIPKIN_SANITIZER* env vars."""
    for var in (
        "OTEL_ZIPKIN_SANITIZERS",
        "OTEL_ZIPKIN_SANITIZER_LOG_SANITIZED_SPANS",
    ):
        monkeypatch.delenv(var, raising=False)
