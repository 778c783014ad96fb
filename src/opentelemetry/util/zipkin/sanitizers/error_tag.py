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

from opentelemetry.util.zipkin.attributes import ERROR_MESSAGE_TAG, ERROR_TAG
from opentelemetry.util.zipkin.sanitizer import Sanitizer
from opentelemetry.util.zipkin.types import (
    AnnotationType,
    BinaryAnnotation,
    Span,
)

_TRUE = b"\x01"
_FALSE = b"\x00"


def _text(value: bytes) -> str:
    return value.decode("utf-8", errors="replace").casefold()


class ErrorTagSanitizer(Sanitizer):
    """Converts ``error`` tags to BOOL type.

    ``"true"`` (any case) and empty values become true, ``"false"`` becomes
    false. Any other text is treated as an affirmative error and copied into
    an appended ``error.message`` tag. Every non-BOOL ``error`` tag on the
    span is handled independently, so a span with several of them gets one
    ``error.message`` per free-text value, in tag order.
    """

    def sanitize(self, span: Span) -> Span:
        annotations = span.binary_annotations
        # Tags appended below must not be visited again.
        count = len(annotations)
        for index in range(count):
            anno = annotations[index]
            if anno.annotation_type == AnnotationType.BOOL:
                continue
            if anno.key.casefold() != ERROR_TAG:
                continue
            anno.annotation_type = AnnotationType.BOOL

            text = _text(anno.value)
            if text == "true" or not anno.value:
                anno.value = _TRUE
            elif text == "false":
                anno.value = _FALSE
            else:
                annotations.append(
                    BinaryAnnotation(
                        key=ERROR_MESSAGE_TAG,
                        value=anno.value,
                        annotation_type=AnnotationType.STRING,
                    )
                )
                anno.value = _TRUE
        return span


def new_error_tag_sanitizer(
    logger: Optional[logging.Logger] = None,
) -> Sanitizer:
    return ErrorTagSanitizer(logger)
