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
"""Container exceptions: invalid bean definitions and broken order accessors."""

from __future__ import annotations

from groundlevel.kernel.exceptions import InfrastructureException


class BeanDefinitionError(InfrastructureException):
    """A bean cannot be registered as requested."""

    def __init__(self, bean_name: str, reason: str) -> None:
        self.bean_name = bean_name
        self.reason = reason
        super().__init__(
            message=f"Invalid bean definition '{bean_name}': {reason}",
            code="BEAN_DEFINITION",
            context={"bean_name": bean_name},
        )


class NoSuchBeanError(InfrastructureException):
    """No registration exists under the requested name."""

    def __init__(self, bean_name: str, *, suggestions: list[str] | None = None) -> None:
        self.bean_name = bean_name
        self.suggestions = suggestions or []

        lines = [f"No bean named '{bean_name}' is registered"]
        if self.suggestions:
            lines.append("")
            lines.append(f"  Similar registered names: {', '.join(self.suggestions)}")

        super().__init__(
            message="\n".join(lines),
            code="NO_SUCH_BEAN",
            context={"bean_name": bean_name},
        )


class OrderResolutionError(InfrastructureException):
    """The order accessor or @order annotation of a candidate is not a usable int.

    This is a defect in the candidate object, never a reason to fall back
    to the default order. The original error is chained as ``__cause__``.
    """

    def __init__(self, *, candidate_type: type, accessor: str, reason: str) -> None:
        self.candidate_type = candidate_type
        self.accessor = accessor
        self.reason = reason
        type_name = getattr(candidate_type, "__qualname__", repr(candidate_type))
        # "@order" names an annotation, anything else a method.
        source = accessor if accessor.startswith("@") else f"{accessor}()"
        super().__init__(
            message=f"Cannot resolve order of {type_name}: {source} {reason}",
            code="ORDER_RESOLUTION",
            context={"candidate_type": type_name, "accessor": accessor},
        )
