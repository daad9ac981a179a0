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
"""Tests for @bean factory methods and stereotype decorators."""

from groundlevel.container.annotations import declared_annotation
from groundlevel.container.bean import bean, is_bean_method
from groundlevel.container.ordering import order
from groundlevel.container.stereotypes import component, configuration, service, stereotype_of


class TestBeanDecorator:
    def test_bean_marks_method(self):
        @configuration
        class MyConfig:
            @bean
            def my_service(self) -> str:
                return "hello"

        assert MyConfig.my_service.__groundlevel_bean__ is True
        assert is_bean_method(MyConfig.my_service)

    def test_bean_with_name(self):
        @configuration
        class MyConfig:
            @bean(name="customName")
            def my_service(self) -> str:
                return "hello"

        assert MyConfig.my_service.__groundlevel_bean_name__ == "customName"

    def test_plain_method_is_not_bean(self):
        class MyConfig:
            def helper(self) -> str:
                return "hello"

        assert not is_bean_method(MyConfig.helper)

    def test_bound_method_is_bean(self):
        @configuration
        class MyConfig:
            @bean
            def my_service(self) -> str:
                return "hello"

        assert is_bean_method(MyConfig().my_service)

    def test_stacks_with_order_either_way(self):
        @configuration
        class MyConfig:
            @bean
            @order(1)
            def first(self) -> str:
                return "a"

            @order(2)
            @bean
            def second(self) -> str:
                return "b"

        assert declared_annotation(MyConfig.first, "order") == {"value": 1}
        assert declared_annotation(MyConfig.second, "order") == {"value": 2}
        assert is_bean_method(MyConfig.first)
        assert is_bean_method(MyConfig.second)


class TestStereotypes:
    def test_component(self):
        @component
        class Widget:
            pass

        assert stereotype_of(Widget) == "component"

    def test_service_with_name(self):
        @service(name="billing")
        class BillingService:
            pass

        assert stereotype_of(BillingService) == "service"
        assert BillingService.__groundlevel_bean_name__ == "billing"

    def test_configuration(self):
        @configuration
        class AppConfig:
            pass

        assert stereotype_of(AppConfig) == "configuration"

    def test_stereotype_not_inherited(self):
        @configuration
        class AppConfig:
            pass

        class Derived(AppConfig):
            pass

        assert stereotype_of(Derived) == ""

    def test_decorator_names(self):
        assert component.__name__ == "component"
        assert configuration.__name__ == "configuration"
