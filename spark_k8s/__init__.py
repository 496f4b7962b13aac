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

"""Driver configuration steps for running Spark on Kubernetes. Import from spark_k8s."""

from importlib.metadata import PackageNotFoundError, version

from spark_k8s.common.clock import Clock, ManualClock, SystemClock
from spark_k8s.submit.steps.base import DriverConfigurationStep, apply_steps
from spark_k8s.submit.steps.driver_service import (
    DriverServiceBootstrapStep,
    build_driver_services,
    get_driver_hostname,
    resolve_service_name,
)
from spark_k8s.submit.types.types import KubernetesDriverSpec, SparkConf
from spark_k8s.submit.types.validation import ConfigurationConflictError, ValidationError
from spark_k8s.submit.utils import get_resource_name_prefix

try:
    __version__ = version("spark-k8s-submit")
except PackageNotFoundError:
    # Running from a source tree that was never installed
    __version__ = "dev"

__all__ = [
    # Steps
    "DriverConfigurationStep",
    "DriverServiceBootstrapStep",
    "apply_steps",
    # Service naming and descriptors
    "build_driver_services",
    "get_driver_hostname",
    "get_resource_name_prefix",
    "resolve_service_name",
    # Types
    "KubernetesDriverSpec",
    "SparkConf",
    # Time sources
    "Clock",
    "ManualClock",
    "SystemClock",
    # Exceptions
    "ConfigurationConflictError",
    "ValidationError",
]
