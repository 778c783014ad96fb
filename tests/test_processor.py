"""Tests for SanitizingSpanProcessor."""

import logging

import pytest

from opentelemetry.util.zipkin import (
    BinaryAnnotation,
    ChainedSanitizer,
    Sanitizer,
    SanitizingSpanProcessor,
    Span,
    create_sanitizer_chain,
)

_LOGGER_NAME = "test.zipkin.processor"


class _Replacing(Sanitizer):
    def sanitize(self, span):
        return Span(trace_id=span.trace_id, id=span.id, duration=5)


class TestSanitizingSpanProcessor:
    def test_forwards_sanitized_span(self):
        received = []
        processor = SanitizingSpanProcessor(
            create_sanitizer_chain(["duration"]), next_stage=received.append
        )
        actual = processor.on_span(Span(duration=-2))
        assert received == [actual]
        assert actual.duration == 1

    def test_forwards_replacement_span(self):
        received = []
        processor = SanitizingSpanProcessor(
            _Replacing(), next_stage=received.append
        )
        original = Span(trace_id=1, id=2)
        actual = processor.on_span(original)
        assert actual is not original
        assert received[0] is actual

    def test_process_spans_preserves_order_and_counts(self):
        processor = SanitizingSpanProcessor(
            create_sanitizer_chain(["duration", "parent_id", "error_tag"])
        )
        spans = [
            Span(id=1, duration=10),
            Span(id=2, parent_id=0, duration=10),
            Span(id=3),
            Span(
                id=4,
                duration=10,
                binary_annotations=[BinaryAnnotation.string("error", "x")],
            ),
        ]
        actual = processor.process_spans(spans)
        assert [s.id for s in actual] == [1, 2, 3, 4]
        assert processor.processed_count == 4
        # span 3 only had a missing duration, which is filled silently
        assert processor.sanitized_count == 2

    def test_empty_chain_forwards_untouched(self):
        received = []
        processor = SanitizingSpanProcessor(
            ChainedSanitizer(), next_stage=received.append
        )
        span = Span(parent_id=0)
        assert processor.on_span(span) is span
        assert received == [span]
        assert processor.sanitized_count == 0

    def test_logs_sanitized_spans_when_enabled(self, caplog):
        caplog.set_level(logging.DEBUG, logger=_LOGGER_NAME)
        processor = SanitizingSpanProcessor(
            create_sanitizer_chain(["duration", "parent_id"]),
            log_sanitized_spans=True,
            logger=logging.getLogger(_LOGGER_NAME),
        )
        processor.on_span(Span(trace_id=0x1F, id=0x2A, parent_id=0, duration=-1))
        records = [r for r in caplog.records if r.name == _LOGGER_NAME]
        assert len(records) == 1
        assert records[0].traceID == "1f"
        assert records[0].spanID == "2a"
        assert "errNegativeDuration, errZeroParentID" in records[0].getMessage()

    def test_silent_when_logging_disabled(self, caplog):
        caplog.set_level(logging.DEBUG, logger=_LOGGER_NAME)
        processor = SanitizingSpanProcessor(
            create_sanitizer_chain(["duration"]),
            logger=logging.getLogger(_LOGGER_NAME),
        )
        processor.on_span(Span(duration=-1))
        assert not [r for r in caplog.records if r.name == _LOGGER_NAME]

    def test_next_stage_errors_propagate(self):
        def failing(span):
            raise RuntimeError("storage down")

        processor = SanitizingSpanProcessor(
            ChainedSanitizer(), next_stage=failing
        )
        with pytest.raises(RuntimeError, match="storage down"):
            processor.on_span(Span())

    def test_from_env(self, clean_env, monkeypatch, caplog):
        caplog.set_level(logging.DEBUG, logger=_LOGGER_NAME)
        monkeypatch.setenv("OTEL_ZIPKIN_SANITIZERS", "parent_id")
        monkeypatch.setenv("OTEL_ZIPKIN_SANITIZER_LOG_SANITIZED_SPANS", "true")
        processor = SanitizingSpanProcessor.from_env(
            logger=logging.getLogger(_LOGGER_NAME)
        )
        actual = processor.on_span(Span(id=7, parent_id=0, duration=-1))
        assert actual.parent_id is None
        assert actual.duration == -1
        records = [r for r in caplog.records if r.name == _LOGGER_NAME]
        assert len(records) == 1
        assert records[0].spanID == "7"
        assert "errZeroParentID" in records[0].getMessage()

    def test_untagged_repairs_are_not_counted(self, caplog):
        caplog.set_level(logging.DEBUG, logger=_LOGGER_NAME)
        processor = SanitizingSpanProcessor(
            create_sanitizer_chain(["duration", "error_tag"]),
            log_sanitized_spans=True,
            logger=logging.getLogger(_LOGGER_NAME),
        )
        span = Span(binary_annotations=[BinaryAnnotation.string("error", "true")])
        actual = processor.on_span(span)
        assert actual.duration == 1
        assert actual.binary_annotations[0].value == b"\x01"
        assert processor.processed_count == 1
        assert processor.sanitized_count == 0
        assert not [r for r in caplog.records if r.name == _LOGGER_NAME]

    def test_shutdown_reports_totals(self, caplog):
        caplog.set_level(logging.INFO)
        processor = SanitizingSpanProcessor(
            create_sanitizer_chain(["duration"])
        )
        processor.process_spans([Span(duration=-1), Span(duration=3)])
        processor.shutdown()
        assert "Spans processed: 2, sanitized: 1" in caplog.text
