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
"""Exception hierarchy for groundlevel.

All library exceptions inherit from GroundLevelException, so callers can
catch one type to handle every failure raised by the library.

Categories:
- ConfigurationException: invalid configuration values or bindings
- InfrastructureException: broken registry metadata or managed objects
"""

from __future__ import annotations


class GroundLevelException(Exception):
    """Base exception for all groundlevel errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "ORDER_RESOLUTION").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


class ConfigurationException(GroundLevelException):
    """A configuration value is missing, malformed or cannot be bound."""


class InfrastructureException(GroundLevelException):
    """Failures of the registry or of the objects it manages."""
