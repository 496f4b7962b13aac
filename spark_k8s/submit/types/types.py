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

"""Types for Kubernetes driver submission."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from spark_k8s.submit.types import validation


class SparkConf(BaseModel):
    """Immutable snapshot of Spark configuration properties.

    Every update returns a new SparkConf, so a snapshot handed to a submission step is
    never changed by it.

    Example:
        conf = SparkConf(entries={"spark.kubernetes.namespace": "spark"})
        conf = conf.set("spark.driver.port", 7078)
    """

    model_config = ConfigDict(frozen=True)

    entries: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("entries", mode="after")
    @classmethod
    def _freeze_entries(cls, entries: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(entries))

    @field_serializer("entries")
    def _serialize_entries(self, entries: Mapping[str, str]) -> dict[str, str]:
        return dict(entries)

    def __hash__(self) -> int:
        return hash(frozenset(self.entries.items()))

    def __contains__(self, key: str) -> bool:
        return key in self.entries

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get a property value, or default when it is not set."""
        return self.entries.get(key, default)

    def get_int(self, key: str, default: int) -> int:
        """Get a property as an integer.

        Raises:
            ValidationError: If the configured value is not an integer.
        """
        value = self.entries.get(key)
        if value is None:
            return default
        return validation.validate_int(value, key)

    def set(self, key: str, value: Any) -> "SparkConf":
        """Return a copy of this conf with key set to str(value)."""
        return self.set_all({key: value})

    def set_all(self, values: dict[str, Any]) -> "SparkConf":
        """Return a copy of this conf with every key in values set."""
        entries = dict(self.entries)
        entries.update({key: str(value) for key, value in values.items()})
        return self.model_copy(update={"entries": MappingProxyType(entries)})


@dataclass(frozen=True)
class KubernetesDriverSpec:
    """Driver state passed through the chain of driver configuration steps.

    Args:
        driver_spark_conf: Spark configuration the driver will start with.
        other_kubernetes_resources: Resources to create alongside the driver pod, in
            creation order. Typically kubernetes.client models such as V1Service.
    """

    driver_spark_conf: SparkConf = field(default_factory=SparkConf)
    other_kubernetes_resources: tuple[Any, ...] = ()

    @classmethod
    def initial_spec(cls, spark_conf: SparkConf) -> "KubernetesDriverSpec":
        """Spec for a fresh submission with no extra resources."""
        return cls(driver_spark_conf=spark_conf)
