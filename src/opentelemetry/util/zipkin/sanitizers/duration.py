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

from __future__ import annotations

import logging
from typing import Optional

from opentelemetry.util.zipkin.attributes import NEGATIVE_DURATION_TAG
from opentelemetry.util.zipkin.sanitizer import Sanitizer
from opentelemetry.util.zipkin.types import BinaryAnnotation, Span

# Microseconds assigned when the client sent no usable duration.
DEFAULT_DURATION = 1


class SpanDurationSanitizer(Sanitizer):
    """Replaces a missing or negative duration with ``DEFAULT_DURATION``.

    A missing duration is common and is filled silently. A negative one is
    kept as the decimal text of an ``errNegativeDuration`` tag.
    """

    def sanitize(self, span: Span) -> Span:
        if span.duration is None:
            span.duration = DEFAULT_DURATION
            return span
        duration = span.duration
        if duration >= 0:
            return span
        span.duration = DEFAULT_DURATION
        span.binary_annotations.append(
            BinaryAnnotation.string(NEGATIVE_DURATION_TAG, str(duration))
        )
        return span


def new_span_duration_sanitizer(
    logger: Optional[logging.Logger] = None,
) -> Sanitizer:
    return SpanDurationSanitizer(logger)
