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

"""Name based registry of sanitizer factories.

Factories take an optional :class:`logging.Logger` and return a
:class:`~opentelemetry.util.zipkin.sanitizer.Sanitizer`. Besides the built-in
rules, factories are discovered from the
``opentelemetry_util_zipkin_sanitizers`` entry-point group.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from opentelemetry.util._importlib_metadata import (
    entry_points,  # pyright: ignore[reportUnknownVariableType]
)
from opentelemetry.util.zipkin.env import read_sanitizer_names
from opentelemetry.util.zipkin.sanitizer import ChainedSanitizer, Sanitizer
from opentelemetry.util.zipkin.sanitizers import (
    new_error_tag_sanitizer,
    new_parent_id_sanitizer,
    new_span_duration_sanitizer,
)

_LOGGER = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "opentelemetry_util_zipkin_sanitizers"

SanitizerFactory = Callable[[Optional[logging.Logger]], Sanitizer]

STANDARD_SANITIZERS = ("duration", "parent_id", "error_tag")

_FACTORIES: Dict[str, SanitizerFactory] = {
    "duration": new_span_duration_sanitizer,
    "parent_id": new_parent_id_sanitizer,
    "error_tag": new_error_tag_sanitizer,
}
_LOCK = RLock()
_ENTRY_POINTS_LOADED = False


def register_sanitizer(name: str, factory: SanitizerFactory) -> None:
    """Register ``factory`` under ``name`` (case-insensitive)."""
    key = name.strip().lower()
    if not key:
        raise ValueError("Sanitizer name must not be empty")
    with _LOCK:
        _FACTORIES[key] = factory


def _load_entry_points() -> None:
    global _ENTRY_POINTS_LOADED
    if _ENTRY_POINTS_LOADED:
        return
    # Lookups wait here until discovery has registered every entry point.
    with _LOCK:
        if _ENTRY_POINTS_LOADED:
            return
        try:
            entries = entry_points(group=ENTRY_POINT_GROUP)
        except Exception:  # pragma: no cover - defensive
            _LOGGER.debug("Sanitizer entry point group not available")
            entries = []
        for ep in entries:  # type: ignore[assignment]
            name = getattr(ep, "name", "").strip().lower()
            if not name or name in _FACTORIES:
                continue
            try:
                factory = ep.load()
            except Exception as exc:  # pragma: no cover - defensive
                _LOGGER.debug(
                    "Failed to load sanitizer '%s': %s",
                    name,
                    exc,
                    exc_info=True,
                )
                continue
            if not callable(factory):
                _LOGGER.warning(
                    "Sanitizer entry point '%s' is not callable", name
                )
                continue
            register_sanitizer(name, factory)
        _ENTRY_POINTS_LOADED = True


def get_sanitizer_factory(name: str) -> SanitizerFactory:
    _load_entry_points()
    key = name.strip().lower()
    try:
        return _FACTORIES[key]
    except KeyError:
        raise ValueError(f"Unknown sanitizer '{name}'") from None


def list_sanitizers() -> List[str]:
    _load_entry_points()
    return sorted(_FACTORIES)


def new_standard_sanitizers(
    logger: Optional[logging.Logger] = None,
) -> List[Sanitizer]:
    """Return the built-in sanitizers in the order they must run."""
    return [
        new_span_duration_sanitizer(logger),
        new_parent_id_sanitizer(logger),
        new_error_tag_sanitizer(logger),
    ]


def create_sanitizer_chain(
    names: Optional[Sequence[str]] = None,
    logger: Optional[logging.Logger] = None,
    env: Mapping[str, str] | None = None,
) -> ChainedSanitizer:
    """Build a chain from ``names`` or, when omitted, from the environment.

    A single name may be passed as a plain string. Unknown names are logged
    and skipped; the remaining sanitizers keep the
    requested order.
    """
    if names is None:
        names = read_sanitizer_names(env)
    if isinstance(names, str):
        names = [names]
    if names is None:
        return ChainedSanitizer(*new_standard_sanitizers(logger))
    sanitizers: List[Sanitizer] = []
    for name in names:
        try:
            factory = get_sanitizer_factory(name)
        except ValueError:
            _LOGGER.warning(
                "Ignoring unknown sanitizer '%s'; available: %s",
                name,
                ", ".join(list_sanitizers()),
            )
            continue
        sanitizers.append(factory(logger))
    _LOGGER.debug(
        "Created sanitizer chain",
        extra={"sanitizers": [type(s).__name__ for s in sanitizers]},
    )
    return ChainedSanitizer(*sanitizers)
