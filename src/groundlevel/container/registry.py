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
"""Bean registrations and the registry the ordering engine reads from."""

from __future__ import annotations

import difflib
import inspect
import typing
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, Protocol, TypeVar, runtime_checkable

import structlog

from groundlevel.container.annotations import declared_annotation
from groundlevel.container.bean import is_bean_method
from groundlevel.container.exceptions import BeanDefinitionError, NoSuchBeanError
from groundlevel.container.stereotypes import stereotype_of

T = TypeVar("T")

logger = structlog.get_logger("groundlevel.container.registry")


@dataclass(frozen=True)
class ProducerMethod:
    """The factory function a bean was produced by."""

    func: Callable[..., Any]
    owner: type | None = None

    @property
    def name(self) -> str:
        return getattr(self.func, "__name__", repr(self.func))

    def is_annotated(self, kind: str) -> bool:
        return declared_annotation(self.func, kind) is not None

    def annotation_attributes(self, kind: str) -> dict[str, Any] | None:
        return declared_annotation(self.func, kind)


@dataclass
class Registration:
    """Metadata for a registered bean."""

    name: str
    impl_type: type
    source: ProducerMethod | None = None
    instance: Any = field(default=None, repr=False)


@runtime_checkable
class RegistryQuery(Protocol):
    """Read-only view of a registry, as consumed by the ordering engine."""

    def lookup_by_type(self, cls: type) -> list[str]: ...
    def is_registered(self, name: str) -> bool: ...
    def metadata_for(self, name: str) -> Registration: ...


class BeanRegistry:
    """Named bean registrations, in registration order.

    Holds ready-made instances only; it does not wire dependencies or manage
    lifecycles. Callers must not mutate it while a sort is in progress.
    """

    def __init__(self) -> None:
        self._registrations: dict[str, Registration] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, cls: type, *, name: str = "", instance: Any = None) -> Registration:
        """Register a bean class, instantiating it without arguments if needed."""
        bean_name = name or vars(cls).get("__groundlevel_bean_name__", "") or cls.__name__
        self._check_unique(bean_name)
        if instance is None:
            try:
                instance = cls()
            except Exception as exc:
                raise BeanDefinitionError(bean_name, f"instantiation failed: {exc}") from exc
        return self._add(Registration(name=bean_name, impl_type=type(instance), instance=instance))

    def register_factory(
        self,
        func: Callable[..., Any],
        *,
        instance: Any = None,
        name: str = "",
        owner: type | None = None,
    ) -> Registration:
        """Register a bean produced by *func*, keeping *func* as its producer metadata.

        Without an *instance*, the declared return type stands in for the
        bean type.
        """
        target = getattr(func, "__func__", func)
        bean_name = name or getattr(target, "__groundlevel_bean_name__", "") or target.__name__
        self._check_unique(bean_name)

        if instance is not None:
            impl_type = type(instance)
        else:
            return_type = typing.get_type_hints(target).get("return")
            if not isinstance(return_type, type):
                raise BeanDefinitionError(bean_name, "factory method declares no return type")
            impl_type = return_type

        source = ProducerMethod(func=target, owner=owner)
        return self._add(Registration(name=bean_name, impl_type=impl_type, source=source, instance=instance))

    def register_configuration(self, config: Any) -> list[Registration]:
        """Register a @configuration class (or instance) and every bean its @bean methods produce.

        Bean methods are called in definition order and must take no
        arguments besides ``self``. If any of them fails, nothing from this
        configuration stays registered.
        """
        config_cls = config if isinstance(config, type) else type(config)
        if stereotype_of(config_cls) != "configuration":
            raise BeanDefinitionError(config_cls.__name__, "not a @configuration class")

        registration = self.register(config_cls, instance=None if config is config_cls else config)
        config_instance = registration.instance
        produced = [registration]

        try:
            for attr_name, member in self._bean_methods(config_cls):
                method = getattr(config_instance, attr_name)
                if any(
                    p.default is inspect.Parameter.empty
                    and p.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
                    for p in inspect.signature(method).parameters.values()
                ):
                    raise BeanDefinitionError(attr_name, "@bean methods cannot take arguments")
                produced.append(self.register_factory(member, instance=method(), owner=config_cls))
        except Exception:
            for reg in produced:
                self._registrations.pop(reg.name, None)
            raise

        return produced

    @staticmethod
    def _bean_methods(cls: type) -> list[tuple[str, Any]]:
        """@bean members of *cls* and its bases, in definition order, overrides winning."""
        members: dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            for attr_name, member in vars(klass).items():
                members[attr_name] = member
        return [(n, m) for n, m in members.items() if is_bean_method(m)]

    def _check_unique(self, name: str) -> None:
        if name in self._registrations:
            raise BeanDefinitionError(name, "a bean with this name is already registered")

    def _add(self, registration: Registration) -> Registration:
        self._registrations[registration.name] = registration
        logger.debug(
            "bean_registered",
            bean=registration.name,
            type=registration.impl_type.__qualname__,
            producer=registration.source.name if registration.source else None,
        )
        return registration

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def lookup_by_type(self, cls: type) -> list[str]:
        """Names of registrations whose type is *cls* or a subclass of it."""
        return [name for name, reg in self._registrations.items() if issubclass(reg.impl_type, cls)]

    def is_registered(self, name: str) -> bool:
        return name in self._registrations

    def metadata_for(self, name: str) -> Registration:
        try:
            return self._registrations[name]
        except KeyError:
            raise NoSuchBeanError(
                name,
                suggestions=difflib.get_close_matches(name, list(self._registrations), n=5, cutoff=0.4),
            ) from None

    def get_bean(self, name: str) -> Any:
        """Return the instance registered under *name*."""
        return self.metadata_for(name).instance

    def beans_of_type(self, cls: type[T]) -> dict[str, T]:
        """Instances that are *cls* or a subclass, keyed by bean name."""
        return {
            name: reg.instance
            for name, reg in self._registrations.items()
            if reg.instance is not None and isinstance(reg.instance, cls)
        }

    def names(self) -> list[str]:
        return list(self._registrations)

    def __contains__(self, name: object) -> bool:
        return name in self._registrations

    def __iter__(self) -> Iterator[Registration]:
        return iter(list(self._registrations.values()))

    def __len__(self) -> int:
        return len(self._registrations)
