# Copyright 2026 Firefly Software Solutions Inc.
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
"""Declarative annotations for classes and factory functions.

An annotation is a named attribute map attached to its target by a decorator::

    @annotate("order", value=5)
    class MyService: ...

Class annotations are found through the MRO, so subclasses see the nearest
declaration. Function annotations belong to the function object only.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

T = TypeVar("T")

_ANNOTATIONS_ATTR = "__groundlevel_annotations__"


def _unwrap(target: Any) -> Any:
    """Return the plain function behind bound methods and static/class methods."""
    return getattr(target, "__func__", target)


def annotate(kind: str, **attributes: Any) -> Callable[[T], T]:
    """Attach an annotation of *kind* carrying *attributes* to a class or function."""

    def decorator(target: T) -> T:
        owner = _unwrap(target)
        own = dict(vars(owner).get(_ANNOTATIONS_ATTR) or {})
        own[kind] = dict(attributes)
        setattr(owner, _ANNOTATIONS_ATTR, own)
        return target

    return decorator


def declared_annotation(target: Any, kind: str) -> dict[str, Any] | None:
    """Return the annotation declared directly on *target*, or ``None``."""
    own = vars(_unwrap(target)).get(_ANNOTATIONS_ATTR) or {}
    attributes = own.get(kind)
    return dict(attributes) if attributes is not None else None


def find_annotation(cls: type, kind: str) -> dict[str, Any] | None:
    """Find *kind* on *cls* or the nearest class in its MRO that declares it."""
    for klass in cls.__mro__:
        attributes = declared_annotation(klass, kind)
        if attributes is not None:
            return attributes
    return None


def is_annotated(target: Any, kind: str) -> bool:
    """Check whether *target* itself declares an annotation of *kind*."""
    return declared_annotation(target, kind) is not None
