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

"""Decoded representation of a Zipkin v1 (thrift ``zipkincore``) span.

Field names follow the thrift IDL. Identifiers keep their signed 64-bit wire
representation and are opaque to the sanitizers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional


class AnnotationType(IntEnum):
    BOOL = 0
    BYTES = 1
    I16 = 2
    I32 = 3
    I64 = 4
    DOUBLE = 5
    STRING = 6


@dataclass
class Endpoint:
    """Network context of the host that recorded an annotation."""

    ipv4: int = 0
    port: int = 0
    service_name: str = ""
    ipv6: Optional[bytes] = None


@dataclass
class Annotation:
    timestamp: int
    value: str
    host: Optional[Endpoint] = None


@dataclass
class BinaryAnnotation:
    """Typed key/value tag attached to a span."""

    key: str
    value: bytes = b""
    annotation_type: AnnotationType = AnnotationType.STRING
    host: Optional[Endpoint] = None

    @classmethod
    def string(
        cls, key: str, text: str, host: Optional[Endpoint] = None
    ) -> "BinaryAnnotation":
        return cls(
            key=key,
            value=text.encode("utf-8"),
            annotation_type=AnnotationType.STRING,
            host=host,
        )


def _new_annotations() -> List[Annotation]:
    return []


def _new_binary_annotations() -> List[BinaryAnnotation]:
    return []


@dataclass
class Span:
    """A single Zipkin span as produced by the wire decoder.

    ``parent_id`` of ``None`` denotes a root span. ``timestamp`` and
    ``duration`` are microseconds and may be missing on the wire.
    """

    trace_id: int = 0
    id: int = 0
    name: str = ""
    parent_id: Optional[int] = None
    annotations: List[Annotation] = field(default_factory=_new_annotations)
    binary_annotations: List[BinaryAnnotation] = field(
        default_factory=_new_binary_annotations
    )
    debug: bool = False
    timestamp: Optional[int] = None
    duration: Optional[int] = None
    trace_id_high: Optional[int] = None

    def find_binary_annotations(self, key: str) -> List[BinaryAnnotation]:
        """Return all tags with exactly ``key``, in span order."""
        return [anno for anno in self.binary_annotations if anno.key == key]
