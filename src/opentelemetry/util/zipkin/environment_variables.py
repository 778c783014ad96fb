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

OTEL_ZIPKIN_SANITIZERS = "OTEL_ZIPKIN_SANITIZERS"
"""
.. envvar:: OTEL_ZIPKIN_SANITIZERS

Comma-separated, ordered list of sanitizer names applied to every incoming
Zipkin span. Built-in names are ``duration``, ``parent_id`` and ``error_tag``;
additional names may be registered under the
``opentelemetry_util_zipkin_sanitizers`` entry-point group. Unset or blank
selects the standard chain (``duration,parent_id,error_tag``). The special
value ``none`` disables sanitization entirely.
"""

OTEL_ZIPKIN_SANITIZER_LOG_SANITIZED_SPANS = (
    "OTEL_ZIPKIN_SANITIZER_LOG_SANITIZED_SPANS"
)
"""
.. envvar:: OTEL_ZIPKIN_SANITIZER_LOG_SANITIZED_SPANS

When set to a truthy value (``true``, ``1``, ``yes``, ``on``) the sanitizing
processor reports every repaired span at ``DEBUG`` level, keyed by its trace
and span identifiers.
"""
