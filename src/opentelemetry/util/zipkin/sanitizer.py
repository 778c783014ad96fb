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

"""Sanitizer contract and ordered composition of sanitizers.

Any business rule that normalizes the contents of an incoming Zipkin span
implements :class:`Sanitizer`. Sanitizers never fail: malformed input is
repaired and annotated with a reserved tag instead of being rejected, so a
single bad span can never stall ingestion.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterator, Optional, Tuple

from opentelemetry.util.zipkin.types import Span

_LOGGER = logging.getLogger(__name__)

_UINT64_MASK = (1 << 64) - 1


def _format_id(value: int) -> str:
    # Wire identifiers are signed; report them as unsigned hex.
    return format(value & _UINT64_MASK, "x")


class SpanLogger:
    """Produces logging contexts keyed by a span's trace and span ids."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger if logger is not None else _LOGGER

    def for_span(self, span: Span) -> logging.LoggerAdapter:
        return logging.LoggerAdapter(
            self.logger,
            {
                "traceID": _format_id(span.trace_id),
                "spanID": _format_id(span.id),
            },
        )


class Sanitizer(ABC):
    """Base contract for span sanitizers.

    ``sanitize`` may mutate the given span and returns the span the caller
    must use from then on, which is usually the same object. Implementations
    must be deterministic, perform no I/O and keep no reference to the span
    after returning.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.log = SpanLogger(logger)

    @abstractmethod
    def sanitize(self, span: Span) -> Span:
        """Return the normalized span."""


class ChainedSanitizer(Sanitizer):
    """Applies several sanitizers in series, in registration order."""

    def __init__(self, *sanitizers: Sanitizer) -> None:
        super().__init__()
        self._sanitizers: Tuple[Sanitizer, ...] = tuple(sanitizers)

    @property
    def sanitizers(self) -> Tuple[Sanitizer, ...]:
        return self._sanitizers

    def __len__(self) -> int:
        return len(self._sanitizers)

    def __iter__(self) -> Iterator[Sanitizer]:
        return iter(self._sanitizers)

    def __repr__(self) -> str:
        names = ", ".join(type(s).__name__ for s in self._sanitizers)
        return f"ChainedSanitizer({names})"

    def sanitize(self, span: Span) -> Span:
        for sanitizer in self._sanitizers:
            span = sanitizer.sanitize(span)
        return span


def new_chained_sanitizer(*sanitizers: Sanitizer) -> ChainedSanitizer:
    """Create a sanitizer from the ordered list of passed sanitizers."""
    return ChainedSanitizer(*sanitizers)
