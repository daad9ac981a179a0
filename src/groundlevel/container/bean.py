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
"""@bean factory methods."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar, overload

F = TypeVar("F", bound=Callable)


@overload
def bean(func: F) -> F: ...


@overload
def bean(*, name: str = "") -> Callable[[F], F]: ...


def bean(func: F | None = None, *, name: str = "") -> F | Callable[[F], F]:
    """Mark a method inside a @configuration class as a bean factory.

    The produced object is registered together with the method itself, so
    annotations on the method (such as ``@order``) apply to that bean.
    Decorator order relative to ``@order`` does not matter.
    """

    def decorator(func: F) -> F:
        target = getattr(func, "__func__", func)
        target.__groundlevel_bean__ = True  # type: ignore[attr-defined]
        if name:
            target.__groundlevel_bean_name__ = name  # type: ignore[attr-defined]
        return func

    if func is not None:
        return decorator(func)
    return decorator


def is_bean_method(func: object) -> bool:
    """Check whether *func* was marked with @bean."""
    return bool(getattr(getattr(func, "__func__", func), "__groundlevel_bean__", False))
