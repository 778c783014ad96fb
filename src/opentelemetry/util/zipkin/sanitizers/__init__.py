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

"""Built-in Zipkin span sanitizers."""

from .duration import (
    DEFAULT_DURATION,
    SpanDurationSanitizer,
    new_span_duration_sanitizer,
)
from .error_tag import ErrorTagSanitizer, new_error_tag_sanitizer
from .parent_id import ParentIDSanitizer, new_parent_id_sanitizer

__all__ = [
    "DEFAULT_DURATION",
    "SpanDurationSanitizer",
    "ParentIDSanitizer",
    "ErrorTagSanitizer",
    "new_span_duration_sanitizer",
    "new_parent_id_sanitizer",
    "new_error_tag_sanitizer",
]
