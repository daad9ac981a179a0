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
"""OrderComparator: if it looks like Ordered, then it is Ordered.

The order of a candidate is the first value found by, in turn:

1. the ``@order`` annotation, where one placed on the bean's @bean factory
   method overrides one placed on its class;
2. ``get_order()`` of candidates implementing :class:`Ordered`;
3. a public ``get_order()`` that takes no arguments and is annotated to
   return ``int``, on candidates that do not implement :class:`Ordered`.

Anything else, ``None`` included, gets :data:`LOWEST_PRECEDENCE`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

import structlog

from groundlevel.container.exceptions import OrderResolutionError
from groundlevel.container.metadata import resolve_attributes
from groundlevel.container.ordering import (
    DEFAULT_ACCESSOR,
    LOWEST_PRECEDENCE,
    ORDER_ANNOTATION,
    OrderCapability,
    Ordered,
    probe_capability,
)
from groundlevel.container.registry import BeanRegistry, RegistryQuery
from groundlevel.core.config import Config, config_properties
from groundlevel.kernel.exceptions import ConfigurationException

T = TypeVar("T")

logger = structlog.get_logger("groundlevel.container.comparator")


@config_properties(prefix="groundlevel.ordering")
@dataclass
class OrderingProperties:
    """Tunables of :class:`OrderComparator`."""

    annotation: str = ORDER_ANNOTATION
    accessor: str = DEFAULT_ACCESSOR
    duck_typing: bool = True


class OrderComparator:
    """Compares candidates by order value; lower values sort first."""

    def __init__(self, registry: RegistryQuery, properties: OrderingProperties | None = None) -> None:
        if registry is None:
            raise ValueError("registry is required")
        self._registry = registry
        self._properties = properties or OrderingProperties()
        if not self._properties.accessor or self._properties.accessor.startswith("_"):
            raise ConfigurationException(
                f"Order accessor must be a public method name, got {self._properties.accessor!r}",
                code="ORDERING_ACCESSOR",
            )

        self._strategies: list[tuple[str, Callable[[Any], int | None]]] = [
            ("annotation", self._annotated_order),
            ("ordered", self._declared_order),
        ]
        if self._properties.duck_typing:
            self._strategies.append(("accessor", self._accessor_order))

    @classmethod
    def from_config(cls, registry: RegistryQuery, config: Config) -> OrderComparator:
        """Build a comparator from the ``groundlevel.ordering`` section of *config*."""
        return cls(registry, config.bind(OrderingProperties))

    @property
    def properties(self) -> OrderingProperties:
        return self._properties

    def resolve_order(self, candidate: Any) -> int:
        """Return the order value of *candidate*."""
        if candidate is None:
            return LOWEST_PRECEDENCE

        for strategy, resolve in self._strategies:
            value = resolve(candidate)
            if value is not None:
                logger.debug(
                    "order_resolved",
                    candidate=type(candidate).__qualname__,
                    strategy=strategy,
                    order=value,
                )
                return value
        return LOWEST_PRECEDENCE

    def compare(self, a: Any, b: Any) -> int:
        """Negative, zero or positive as *a* sorts before, with or after *b*."""
        left, right = self.resolve_order(a), self.resolve_order(b)
        return (left > right) - (left < right)

    def sort(self, candidates: Iterable[T]) -> list[T]:
        """Return *candidates* as a new list, ascending by order; ties keep their input order."""
        return sorted(candidates, key=self.resolve_order)

    def _annotated_order(self, candidate: Any) -> int | None:
        attributes = resolve_attributes(self._registry, self._properties.annotation, candidate)
        value = attributes.get("value")
        if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
            raise OrderResolutionError(
                candidate_type=type(candidate),
                accessor=f"@{self._properties.annotation}",
                reason=f"declares value {value!r}, expected int",
            )
        return value

    def _declared_order(self, candidate: Any) -> int | None:
        if not isinstance(candidate, Ordered):
            return None
        return candidate.get_order()

    def _accessor_order(self, candidate: Any) -> int | None:
        accessor = self._properties.accessor
        if probe_capability(type(candidate), accessor) is not OrderCapability.ACCESSOR:
            return None

        try:
            value = getattr(candidate, accessor)()
        except Exception as exc:
            raise OrderResolutionError(
                candidate_type=type(candidate),
                accessor=accessor,
                reason=f"raised {type(exc).__name__}: {exc}",
            ) from exc

        if isinstance(value, bool) or not isinstance(value, int):
            raise OrderResolutionError(
                candidate_type=type(candidate),
                accessor=accessor,
                reason=f"returned {type(value).__name__}, expected int",
            )
        return value


def resolve_order(registry: RegistryQuery, candidate: Any) -> int:
    """Order value of *candidate* under the default ordering rules."""
    return OrderComparator(registry).resolve_order(candidate)


def sorted_by_priority(registry: RegistryQuery, candidates: Iterable[T]) -> list[T]:
    """Sort *candidates* ascending by order value under the default ordering rules."""
    return OrderComparator(registry).sort(candidates)


def get_sorted_beans_of_type(registry: BeanRegistry, bean_type: type[T]) -> list[T]:
    """All bean instances of *bean_type* in *registry*, sorted by order value."""
    return sorted_by_priority(registry, registry.beans_of_type(bean_type).values())
