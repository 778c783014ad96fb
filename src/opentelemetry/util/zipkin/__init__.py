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

"""Normalization of legacy Zipkin spans before storage.

Typical use::

    from opentelemetry.util.zipkin import create_sanitizer_chain

    sanitizer = create_sanitizer_chain()
    span = sanitizer.sanitize(span)

Always continue with the returned span.
"""

from opentelemetry.util.zipkin.processor import SanitizingSpanProcessor
from opentelemetry.util.zipkin.registry import (
    create_sanitizer_chain,
    get_sanitizer_factory,
    list_sanitizers,
    new_standard_sanitizers,
    register_sanitizer,
)
from opentelemetry.util.zipkin.sanitizer import (
    ChainedSanitizer,
    Sanitizer,
    SpanLogger,
    new_chained_sanitizer,
)
from opentelemetry.util.zipkin.sanitizers import (
    ErrorTagSanitizer,
    ParentIDSanitizer,
    SpanDurationSanitizer,
    new_error_tag_sanitizer,
    new_parent_id_sanitizer,
    new_span_duration_sanitizer,
)
from opentelemetry.util.zipkin.types import (
    Annotation,
    AnnotationType,
    BinaryAnnotation,
    Endpoint,
    Span,
)
from opentelemetry.util.zipkin.version import __version__

__all__ = [
    "Annotation",
    "AnnotationType",
    "BinaryAnnotation",
    "ChainedSanitizer",
    "Endpoint",
    "ErrorTagSanitizer",
    "ParentIDSanitizer",
    "Sanitizer",
    "SanitizingSpanProcessor",
    "Span",
    "SpanDurationSanitizer",
    "SpanLogger",
    "create_sanitizer_chain",
    "get_sanitizer_factory",
    "list_sanitizers",
    "new_chained_sanitizer",
    "new_error_tag_sanitizer",
    "new_parent_id_sanitizer",
    "new_span_duration_sanitizer",
    "new_standard_sanitizers",
    "register_sanitizer",
    "__version__",
]
