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
"""End-to-end: configuration file, registry population and ordered bean lookup."""

from pathlib import Path

import groundlevel
from groundlevel.container import (
    BeanRegistry,
    OrderComparator,
    Ordered,
    bean,
    beans_annotated_with,
    configuration,
    get_sorted_beans_of_type,
    order,
    resolve_attributes,
)
from groundlevel.core.config import Config


class Filter:
    pass


@order(10)
class AuthFilter(Filter):
    pass


class MetricsFilter(Filter, Ordered):
    def get_order(self) -> int:
        return 3


class TracingFilter(Filter):
    def priority(self) -> int:
        return 1


class LegacyFilter(Filter):
    def get_order(self) -> int:
        return -5


@configuration
class FilterConfig:
    @bean
    @order(5)
    def auth_filter(self) -> AuthFilter:
        return AuthFilter()

    @bean
    def metrics_filter(self) -> MetricsFilter:
        return MetricsFilter()


class TestOrderedBeans:
    def test_default_rules(self):
        registry = BeanRegistry()
        registry.register_configuration(FilterConfig)
        registry.register(TracingFilter)

        beans = get_sorted_beans_of_type(registry, Filter)

        assert [type(b) for b in beans] == [MetricsFilter, AuthFilter, TracingFilter]
        assert resolve_attributes(registry, "order", registry.get_bean("auth_filter")) == {"value": 5}
        assert beans_annotated_with(registry, "order") == ["auth_filter"]

    def test_rules_from_config_file(self, tmp_path: Path):
        config_file = tmp_path / "groundlevel.yaml"
        config_file.write_text(
            "groundlevel:\n"
            "  ordering:\n"
            "    accessor: priority\n"
        )
        config = Config.from_file(config_file)

        registry = BeanRegistry()
        registry.register_configuration(FilterConfig)
        registry.register(TracingFilter)
        registry.register(LegacyFilter)

        comparator = OrderComparator.from_config(registry, config)
        beans = comparator.sort(registry.beans_of_type(Filter).values())

        # LegacyFilter's get_order is no longer the accessor, so it sorts last.
        assert [type(b) for b in beans] == [TracingFilter, MetricsFilter, AuthFilter, LegacyFilter]

    def test_top_level_exports(self):
        registry = groundlevel.BeanRegistry()
        registry.register(LegacyFilter)

        assert groundlevel.resolve_order(registry, registry.get_bean("LegacyFilter")) == -5
        assert groundlevel.sorted_by_priority(registry, [None, LegacyFilter()])[0].__class__ is LegacyFilter
