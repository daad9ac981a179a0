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
"""Annotation attributes of beans, merged from their class and their producer method."""

from __future__ import annotations

from typing import Any

from groundlevel.container.annotations import find_annotation
from groundlevel.container.registry import BeanRegistry, ProducerMethod, RegistryQuery


def resolve_attributes(registry: RegistryQuery, kind: str, candidate: Any) -> dict[str, Any]:
    """Compute the attributes of annotation *kind* for *candidate*.

    Take the following example::

        @order(1)
        class MyBean: ...

    Resolving ``"order"`` on an instance of ``MyBean`` yields ``{"value": 1}``.
    If the instance was instead produced by a configuration method::

        @configuration
        class MyConfiguration:
            @bean
            @order(2)
            def my_bean(self) -> MyBean:
                return MyBean()

    the result is ``{"value": 2}``: attributes declared on the producer method
    replace class-level ones key by key. When several registrations of the
    candidate's type carry an annotated producer method, the first one in
    registry order contributes; which one that is should not be relied upon.

    An empty dict means the annotation was found nowhere.
    """
    producers: list[ProducerMethod] = []
    for name in registry.lookup_by_type(type(candidate)):
        if not registry.is_registered(name):
            continue
        source = registry.metadata_for(name).source
        if isinstance(source, ProducerMethod) and source.is_annotated(kind):
            producers.append(source)

    results = dict(find_annotation(type(candidate), kind) or {})
    if producers:
        results.update(producers[0].annotation_attributes(kind) or {})
    return results


def beans_annotated_with(registry: BeanRegistry, kind: str) -> list[str]:
    """Names of beans whose producer method declares annotation *kind*, in registry order."""
    return [
        reg.name
        for reg in registry
        if isinstance(reg.source, ProducerMethod) and reg.source.is_annotated(kind)
    ]
