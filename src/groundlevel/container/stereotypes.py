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
"""Stereotype decorators for bean classification.

- @component: generic managed bean
- @service: business logic layer
- @configuration: class whose @bean methods produce beans
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar, overload

T = TypeVar("T", bound=type)


def _make_stereotype(stereotype_name: str) -> Callable[..., Any]:
    """Factory that creates a stereotype decorator with the given name."""

    @overload
    def stereotype(cls: T) -> T: ...

    @overload
    def stereotype(*, name: str = "") -> Callable[[T], T]: ...

    def stereotype(cls: T | None = None, *, name: str = "") -> T | Callable[[T], T]:
        def decorator(cls: T) -> T:
            cls.__groundlevel_stereotype__ = stereotype_name  # type: ignore[attr-defined]
            if name:
                cls.__groundlevel_bean_name__ = name  # type: ignore[attr-defined]
            return cls

        if cls is not None:
            return decorator(cls)
        return decorator

    stereotype.__name__ = stereotype_name
    stereotype.__qualname__ = stereotype_name
    return stereotype


component = _make_stereotype("component")
service = _make_stereotype("service")
configuration = _make_stereotype("configuration")


def stereotype_of(cls: type) -> str:
    """Return the stereotype name of *cls*, or ``""`` when undecorated."""
    return vars(cls).get("__groundlevel_stereotype__", "")
