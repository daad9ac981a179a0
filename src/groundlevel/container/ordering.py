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
"""Bean ordering primitives: @order, precedence constants and the Ordered capability."""

from __future__ import annotations

import abc
import functools
import inspect
import threading
import typing
import weakref
from collections.abc import Callable
from enum import Enum, auto
from typing import Any, TypeVar

from groundlevel.container.annotations import annotate

T = TypeVar("T")

ORDER_ANNOTATION = "order"
DEFAULT_ACCESSOR = "get_order"

HIGHEST_PRECEDENCE: int = -(2**31)
LOWEST_PRECEDENCE: int = 2**31 - 1


def order(value: int = LOWEST_PRECEDENCE) -> Callable[[T], T]:
    """Set the order value for a bean class or a @bean factory method.

    Lower value = higher priority (sorted first). An order declared on the
    factory method overrides the one declared on the produced class.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"@order value must be an int, got {type(value).__name__}")
    return annotate(ORDER_ANNOTATION, value=value)


class Ordered(abc.ABC):
    """Capability of objects that report their own order value."""

    @abc.abstractmethod
    def get_order(self) -> int: ...


class OrderCapability(Enum):
    """How a type exposes its order value, if at all."""

    DECLARED = auto()  # subclass (real or virtual) of Ordered
    ACCESSOR = auto()  # public zero-argument accessor annotated to return int
    NONE = auto()


# type -> {accessor name: qualifies}; entries go away with their type.
_accessor_cache: weakref.WeakKeyDictionary[type, dict[str, bool]] = weakref.WeakKeyDictionary()
_accessor_cache_lock = threading.Lock()


def probe_capability(cls: type, accessor: str = DEFAULT_ACCESSOR) -> OrderCapability:
    """Classify *cls* by how it exposes an order value.

    ``Ordered`` membership is checked on every call, since virtual
    subclasses may be registered at any time. Only the accessor inspection
    is memoised per ``(cls, accessor)``.
    """
    if issubclass(cls, Ordered):
        return OrderCapability.DECLARED
    if not accessor or accessor.startswith("_"):
        return OrderCapability.NONE
    return OrderCapability.ACCESSOR if _has_int_accessor(cls, accessor) else OrderCapability.NONE


def _has_int_accessor(cls: type, accessor: str) -> bool:
    with _accessor_cache_lock:
        known = _accessor_cache.get(cls, {}).get(accessor)
    if known is not None:
        return known

    func = _accessor_function(cls, accessor)
    qualifies = func is not None and _takes_no_arguments(func) and _returns_int(func)
    with _accessor_cache_lock:
        _accessor_cache.setdefault(cls, {})[accessor] = qualifies
    return qualifies


def _accessor_function(cls: type, accessor: str) -> Callable[..., Any] | None:
    """Return the accessor as a callable taking only caller-supplied arguments."""
    try:
        static = inspect.getattr_static(cls, accessor)
    except AttributeError:
        return None

    if isinstance(static, staticmethod):
        return static.__func__
    if isinstance(static, classmethod):
        return getattr(cls, accessor)
    if inspect.isfunction(static):
        # Stand-in for ``self`` so it drops out of the signature.
        return functools.partial(static, None)
    return None


def _takes_no_arguments(func: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return False
    return all(
        param.default is not inspect.Parameter.empty
        or param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        for param in signature.parameters.values()
    )


def _returns_int(func: Callable[..., Any]) -> bool:
    target = getattr(func, "func", func)  # functools.partial
    target = getattr(target, "__func__", target)
    try:
        hints = typing.get_type_hints(target)
    except Exception:
        # Some annotation of the signature does not evaluate; read the raw one.
        hints = {}
    if "return" in hints:
        return_type = hints["return"]
    else:
        try:
            return_type = target.__annotations__.get("return")
        except (AttributeError, NameError):
            return_type = None
    return return_type is int or return_type == "int"
