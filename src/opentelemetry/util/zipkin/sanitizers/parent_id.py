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

from opentelemetry.util.zipkin.attributes import ZERO_PARENT_ID_TAG
from opentelemetry.util.zipkin.sanitizer import Sanitizer
from opentelemetry.util.zipkin.types import BinaryAnnotation, Span


class ParentIDSanitizer(Sanitizer):
    """Turns ``parent_id == 0`` into ``None``, per Zipkin convention.

    Some clients cannot tell "no parent" from "parent id 0"; storage expects
    root spans to carry no parent reference at all.
    """

    def sanitize(self, span: Span) -> Span:
        if span.parent_id is None or span.parent_id != 0:
            return span
        span.binary_annotations.append(
            BinaryAnnotation.string(ZERO_PARENT_ID_TAG, "0")
        )
        span.parent_id = None
        return span


def new_parent_id_sanitizer(
    logger: Optional[logging.Logger] = None,
) -> Sanitizer:
    return ParentIDSanitizer(logger)
