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

"""Base class for driver configuration steps."""

import abc
from collections.abc import Iterable
import logging

from spark_k8s.submit.types.types import KubernetesDriverSpec

logger = logging.getLogger(__name__)


class DriverConfigurationStep(abc.ABC):
    """Abstract base class for a step that configures the Spark driver.

    Steps are chained: each receives the spec produced by the previous one and returns
    a new spec. A step must not mutate the spec it receives.
    """

    @abc.abstractmethod
    def configure_driver(self, driver_spec: KubernetesDriverSpec) -> KubernetesDriverSpec:
        """Apply this step to the driver spec.

        Args:
            driver_spec: Spec produced by the previous step.

        Returns:
            A new KubernetesDriverSpec.

        Raises:
            ValidationError: If the submission configuration is invalid for this step.
        """
        raise NotImplementedError()


def apply_steps(
    driver_spec: KubernetesDriverSpec, steps: Iterable[DriverConfigurationStep]
) -> KubernetesDriverSpec:
    """Apply configuration steps in order and return the final driver spec."""
    for step in steps:
        logger.debug(f"Applying driver configuration step {type(step).__name__}")
        driver_spec = step.configure_driver(driver_spec)
    return driver_spec
