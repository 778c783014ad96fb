# Copyright The OpenTelemetry Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Ingestion stage that sanitizes decoded Zipkin spans before storage.

The stage sits between the wire decoder and the next pipeline stage
(typically the storage writer) and forwards the span returned by the
sanitizer, never the one it received.
"""

import logging
from typing import Callable, Iterable, List, Optional

from opentelemetry.util.zipkin.attributes import RESERVED_TAGS
from opentelemetry.util.zipkin.env import read_log_sanitized_spans_flag
from opentelemetry.util.zipkin.registry import create_sanitizer_chain
from opentelemetry.util.zipkin.sanitizer import Sanitizer, SpanLogger
from opentelemetry.util.zipkin.types import Span

_logger = logging.getLogger(__name__)

SpanConsumer = Callable[[Span], None]


class SanitizingSpanProcessor:
    """
    Applies a sanitizer to every span and hands the result downstream.

    Spans are never dropped. Exceptions raised by ``next_stage`` propagate
    to the caller.

    ``sanitized_count`` and the optional DEBUG report only cover spans that
    gained a reserved tag (``errNegativeDuration``, ``errZeroParentID``,
    ``error.message``). Repairs that add no tag, such as filling a missing
    duration or retyping an ``error="true"`` tag to BOOL, are not counted.
    """

    def __init__(
        self,
        sanitizer: Sanitizer,
        next_stage: Optional[SpanConsumer] = None,
        log_sanitized_spans: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the sanitizing span processor.

        Args:
            sanitizer: The sanitizer (usually a chain) applied to each span
            next_stage: Callable receiving each sanitized span
            log_sanitized_spans: Whether to log spans that received reserved tags
            logger: Logger used for per-span reports
        """
        self._sanitizer = sanitizer
        self._next_stage = next_stage
        self._log_sanitized = log_sanitized_spans
        self._span_logger = SpanLogger(logger or _logger)
        self.processed_count = 0
        self.sanitized_count = 0

    @classmethod
    def from_env(
        cls,
        next_stage: Optional[SpanConsumer] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "SanitizingSpanProcessor":
        """Build a processor configured from ``OTEL_ZIPKIN_SANITIZER*`` variables."""
        return cls(
            create_sanitizer_chain(logger=logger),
            next_stage=next_stage,
            log_sanitized_spans=read_log_sanitized_spans_flag(),
            logger=logger,
        )

    def on_span(self, span: Span) -> Span:
        """Sanitize one span, forward it and return the sanitized span."""
        tags_before = len(span.binary_annotations)
        span = self._sanitizer.sanitize(span)
        self.processed_count += 1

        added = [
            anno.key
            for anno in span.binary_annotations[tags_before:]
            if anno.key in RESERVED_TAGS
        ]
        if added:
            self.sanitized_count += 1
            if self._log_sanitized:
                self._span_logger.for_span(span).debug(
                    "Sanitized span, added tags: %s", ", ".join(added)
                )

        if self._next_stage is not None:
            self._next_stage(span)
        return span

    def process_spans(self, spans: Iterable[Span]) -> List[Span]:
        """Sanitize a batch of spans, preserving their order."""
        return [self.on_span(span) for span in spans]

    def shutdown(self) -> None:
        _logger.info(
            "SanitizingSpanProcessor shutdown. Spans processed: %d, sanitized: %d",
            self.processed_count,
            self.sanitized_count,
        )
