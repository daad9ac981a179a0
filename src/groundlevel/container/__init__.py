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
"""groundlevel container: bean registry and order resolution."""

from groundlevel.container.annotations import annotate, find_annotation, is_annotated
from groundlevel.container.bean import bean
from groundlevel.container.comparator import (
    OrderComparator,
    OrderingProperties,
    get_sorted_beans_of_type,
    resolve_order,
    sorted_by_priority,
)
from groundlevel.container.exceptions import (
    BeanDefinitionError,
    NoSuchBeanError,
    OrderResolutionError,
)
from groundlevel.container.metadata import beans_annotated_with, resolve_attributes
from groundlevel.container.ordering import (
    HIGHEST_PRECEDENCE,
    LOWEST_PRECEDENCE,
    Ordered,
    order,
)
from groundlevel.container.registry import (
    BeanRegistry,
    ProducerMethod,
    Registration,
    RegistryQuery,
)
from groundlevel.container.stereotypes import component, configuration, service

__all__ = [
    "BeanDefinitionError",
    "BeanRegistry",
    "HIGHEST_PRECEDENCE",
    "LOWEST_PRECEDENCE",
    "NoSuchBeanError",
    "OrderComparator",
    "OrderResolutionError",
    "Ordered",
    "OrderingProperties",
    "ProducerMethod",
    "Registration",
    "RegistryQuery",
    "annotate",
    "bean",
    "beans_annotated_with",
    "component",
    "configuration",
    "find_annotation",
    "get_sorted_beans_of_type",
    "is_annotated",
    "order",
    "resolve_attributes",
    "resolve_order",
    "service",
    "sorted_by_priority",
]
