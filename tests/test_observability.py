"""Tests for the observability module."""

import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from src.infrastructure.observability import (
    add_span_attributes,
    add_trace_context,
    get_tracer,
    traced,
)
from src.modules.accounts import Account
from src.modules.login import Credentials, DbAuthentication

# Module-level setup: configure TracerProvider once before any tests run
_exporter = InMemorySpanExporter()
_provider = TracerProvider()
_provider.add_span_processor(SimpleSpanProcessor(_exporter))
trace.set_tracer_provider(_provider)


@pytest.fixture(autouse=True)
def clear_spans():
    """Clear spans before each test."""
    _exporter.clear()
    yield
    _exporter.clear()


def get_finished_spans():
    return _exporter.get_finished_spans()


class TestTracedDecorator:
    """Tests for the @traced decorator."""

    async def test_creates_named_span(self):
        """Should wrap the coroutine in a span with an OK status."""

        @traced("custom.span.name")
        async def my_async_function():
            return "async_result"

        assert await my_async_function() == "async_result"

        spans = get_finished_spans()
        assert len(spans) == 1
        assert spans[0].name == "custom.span.name"
        assert spans[0].status.status_code == trace.StatusCode.OK

    async def test_records_exception(self):
        """Should record the exception, mark the span as error and re-raise."""

        @traced("failing.function")
        async def failing_function():
            raise ValueError("test error")

        with pytest.raises(ValueError, match="test error"):
            await failing_function()

        spans = get_finished_spans()
        assert len(spans) == 1
        assert spans[0].status.status_code == trace.StatusCode.ERROR
        assert [event.name for event in spans[0].events] == ["exception"]

    async def test_preserves_function_metadata(self):
        """Should keep the wrapped function's name."""

        @traced("named")
        async def my_function():
            return None

        assert my_function.__name__ == "my_function"


class TestAddSpanAttributes:
    """Tests for add_span_attributes function."""

    def test_adds_attributes_to_current_span(self):
        tracer = get_tracer("test")

        with tracer.start_as_current_span("test_span"):
            add_span_attributes({"custom_key": "custom_value", "number": 100})

        attrs = dict(get_finished_spans()[0].attributes or {})
        assert attrs.get("custom_key") == "custom_value"
        assert attrs.get("number") == 100

    def test_does_nothing_without_active_span(self):
        add_span_attributes({"key": "value"})


class TestStructlogProcessor:
    """Tests for structlog trace context processor."""

    def test_adds_trace_context_when_in_span(self):
        """Processor should add trace_id and span_id to event dict."""
        tracer = get_tracer("test")

        with tracer.start_as_current_span("test_span"):
            result = add_trace_context(None, "info", {"event": "test_event"})

        assert len(result["trace_id"]) == 32
        assert len(result["span_id"]) == 16

    def test_leaves_event_without_span(self):
        """Processor should not add trace context without an active span."""
        result = add_trace_context(None, "info", {"event": "test_event"})

        assert result == {"event": "test_event"}


class _NoAccounts:
    async def load_by_email(self, email: str) -> Account | None:
        return None


class _NeverCalled:
    async def compare(self, plaintext: str, digest: str) -> bool:
        raise AssertionError("compare should not be called")

    async def generate(self, account_id: str) -> str:
        raise AssertionError("generate should not be called")


class TestAuthenticationSpan:
    """Tests for spans emitted by the credential verifier."""

    async def test_authenticate_span_outcome(self):
        """Should emit a login.authenticate span tagged with the outcome."""
        sut = DbAuthentication(_NoAccounts(), _NeverCalled(), _NeverCalled())

        await sut.authenticate(Credentials(email="a@b.com", password="x"))

        spans = get_finished_spans()
        assert [span.name for span in spans] == ["login.authenticate"]
        assert spans[0].attributes["login.outcome"] == "not_authenticated"
