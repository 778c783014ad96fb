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

"""Environment helpers for sanitizer configuration."""

from __future__ import annotations

import logging
import os
from typing import List, Mapping

from opentelemetry.util.zipkin.environment_variables import (
    OTEL_ZIPKIN_SANITIZER_LOG_SANITIZED_SPANS,
    OTEL_ZIPKIN_SANITIZERS,
)

_TRUTHY = {"1", "true", "yes", "on"}
_DISABLED = "none"
_LOGGER = logging.getLogger(__name__)


def _get_env(name: str, source: Mapping[str, str] | None = None) -> str | None:
    env = source if source is not None else os.environ
    return env.get(name)


def read_sanitizer_names(
    env: Mapping[str, str] | None = None,
) -> List[str] | None:
    """Return the configured sanitizer names in order.

    ``None`` means nothing was configured and the standard chain applies;
    an empty list means sanitization is disabled.
    """
    raw = _get_env(OTEL_ZIPKIN_SANITIZERS, env)
    if raw is None or raw.strip() == "":
        return None
    names: List[str] = []
    for item in raw.split(","):
        name = item.strip().lower()
        if not name or name in names:
            continue
        names.append(name)
    if _DISABLED in names:
        if len(names) > 1:
            _LOGGER.warning(
                "%s contains '%s' alongside other names; disabling all sanitizers",
                OTEL_ZIPKIN_SANITIZERS,
                _DISABLED,
            )
        return []
    return names


def read_log_sanitized_spans_flag(
    env: Mapping[str, str] | None = None,
) -> bool:
    raw = _get_env(OTEL_ZIPKIN_SANITIZER_LOG_SANITIZED_SPANS, env)
    if raw is None:
        return False
    return raw.strip().lower() in _TRUTHY
