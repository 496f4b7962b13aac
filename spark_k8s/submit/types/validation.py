# Copyright 2025 The Kubeflow Authors.
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

"""Validation utilities for driver submission inputs.

Validation runs before any Kubernetes resource is described, so a bad configuration
fails fast with a message naming what to fix instead of surfacing later as an
obscure API server rejection.
"""

import re
from typing import Optional

from spark_k8s.submit import constants


class ValidationError(ValueError):
    """Raised when submission input validation fails.

    This exception provides clear, actionable error messages to help users
    fix their configuration quickly.
    """


class ConfigurationConflictError(ValidationError):
    """Raised when the Spark configuration sets a key that Kubernetes mode manages.

    Args:
        key: The offending configuration key.
        reason: Why the key cannot be set by the user.
    """

    def __init__(self, key: str, reason: str):
        self.key = key
        super().__init__(f"{key} is not supported in Kubernetes mode, as {reason}")


def validate_unset(value: Optional[str], key: str, reason: str) -> None:
    """Validate that a configuration key managed by Kubernetes was not set by the user.

    Args:
        value: The value the user configured for the key, or None.
        key: Configuration key name used in the error message.
        reason: Why the key is managed.

    Raises:
        ConfigurationConflictError: If the key has a value.
    """
    if value is not None:
        raise ConfigurationConflictError(key, reason)


def validate_int(value: str, key: str) -> int:
    """Parse an integer configuration value.

    Only an optional sign followed by ASCII digits is accepted. Whitespace and
    underscore separators are rejected, as Spark rejects them.

    Raises:
        ValidationError: If the value is not an integer.
    """
    if not re.fullmatch(r"[+-]?[0-9]+", value):
        raise ValidationError(
            f"{key} must be an integer, got {value!r}. Example: {key}=7078"
        )
    return int(value)


def validate_service_name(name: str) -> None:
    """Validate a Kubernetes service name against the DNS-1123 label rules it can break.

    Args:
        name: Service name.

    Raises:
        ValidationError: If the name is empty, too long, or starts or ends with "-".
    """
    if not name:
        raise ValidationError("service name cannot be empty")

    if name.startswith("-") or name.endswith("-"):
        raise ValidationError(
            f"Invalid service name: {name!r}. Must start and end with an alphanumeric character."
        )

    if len(name) > constants.DNS_LABEL_MAX_LENGTH:
        raise ValidationError(
            f"Service name {name!r} is too long "
            f"({len(name)} chars, max {constants.DNS_LABEL_MAX_LENGTH})"
        )


def validate_app_name(app_name: Optional[str]) -> None:
    """Validate the Spark application name used to build resource names.

    Raises:
        ValidationError: If validation fails.
    """
    if not isinstance(app_name, str):
        raise ValidationError(f"app_name must be a string, got {type(app_name).__name__}")

    if not app_name.strip():
        raise ValidationError("app_name cannot be empty or whitespace")
