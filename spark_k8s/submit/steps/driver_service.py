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

"""Driver service bootstrap step.

Makes the driver reachable by executor pods through a headless service, and exposes
the driver UI through a NodePort service. The headless service's ports are the ports
executors reach the driver pod at for RPC and block transfers.
"""

import dataclasses
import logging

from kubernetes import client

from spark_k8s.common.clock import Clock
from spark_k8s.submit import constants
from spark_k8s.submit.steps.base import DriverConfigurationStep
from spark_k8s.submit.types import validation
from spark_k8s.submit.types.types import KubernetesDriverSpec, SparkConf

logger = logging.getLogger(__name__)


def resolve_service_name(resource_name_prefix: str, clock: Clock) -> str:
    """Get the driver service name for a resource name prefix.

    The preferred name is the prefix followed by "-driver-svc". When that is longer
    than MAX_SERVICE_NAME_LENGTH, a name built from the current clock time is used.

    Args:
        resource_name_prefix: Prefix shared by the application's Kubernetes resources.
        clock: Time source for the fallback name.

    Returns:
        The resolved service name.
    """
    preferred_name = f"{resource_name_prefix}{constants.DRIVER_SVC_POSTFIX}"
    if len(preferred_name) <= constants.MAX_SERVICE_NAME_LENGTH:
        return preferred_name

    shorter_name = (
        f"{constants.FALLBACK_SVC_PREFIX}{clock.get_time_millis()}{constants.DRIVER_SVC_POSTFIX}"
    )
    logger.warning(
        f"Driver's hostname would preferably be {preferred_name}, but this is too long "
        f"(must be <= {constants.MAX_SERVICE_NAME_LENGTH} characters). Falling back to use "
        f"{shorter_name} as the driver service's name."
    )
    return shorter_name


def build_driver_services(
    service_name: str,
    labels: dict[str, str],
    driver_port: int,
    block_manager_port: int,
    ui_port: int,
    node_port: int,
) -> tuple[client.V1Service, client.V1Service]:
    """Build the headless driver service and the NodePort UI service.

    Args:
        service_name: Resolved driver service name.
        labels: Selector labels of the driver pod.
        driver_port: Driver RPC port.
        block_manager_port: Driver block manager port.
        ui_port: Driver UI port.
        node_port: Node port for the UI service, 0 to let Kubernetes allocate one.

    Returns:
        Tuple of (driver service, UI service).

    Raises:
        ValidationError: If the UI service name exceeds the DNS label length.
    """
    ui_service_name = f"{service_name}{constants.UI_SVC_POSTFIX}"
    validation.validate_service_name(service_name)
    validation.validate_service_name(ui_service_name)

    driver_service = client.V1Service(
        api_version="v1",
        kind="Service",
        metadata=client.V1ObjectMeta(name=service_name),
        spec=client.V1ServiceSpec(
            cluster_ip=constants.HEADLESS_CLUSTER_IP,
            selector=dict(labels),
            ports=[
                client.V1ServicePort(
                    name=constants.DRIVER_PORT_NAME,
                    port=driver_port,
                    target_port=driver_port,
                ),
                client.V1ServicePort(
                    name=constants.BLOCK_MANAGER_PORT_NAME,
                    port=block_manager_port,
                    target_port=block_manager_port,
                ),
            ],
        ),
    )

    ui_service = client.V1Service(
        api_version="v1",
        kind="Service",
        metadata=client.V1ObjectMeta(name=ui_service_name),
        spec=client.V1ServiceSpec(
            type=constants.NODE_PORT_SERVICE_TYPE,
            selector=dict(labels),
            ports=[
                client.V1ServicePort(
                    name=constants.UI_PORT_NAME,
                    port=ui_port,
                    node_port=node_port,
                ),
            ],
        ),
    )

    return driver_service, ui_service


def get_driver_hostname(service_name: str, namespace: str, domain: str) -> str:
    """Fully qualified in-cluster hostname of the driver service."""
    return f"{service_name}.{namespace}.{domain}"


class DriverServiceBootstrapStep(DriverConfigurationStep):
    """Expose the driver through Kubernetes services and point its conf at them.

    Args:
        resource_name_prefix: Prefix shared by the application's Kubernetes resources.
        driver_labels: Labels of the driver pod, used as the services' selector.
        submission_spark_conf: Spark configuration given at submission.
        clock: Time source for fallback service names.

    Example:
        step = DriverServiceBootstrapStep(
            "job-123", {"app": "job-123"}, submission_conf, SystemClock()
        )
        driver_spec = step.configure_driver(KubernetesDriverSpec.initial_spec(conf))
    """

    def __init__(
        self,
        resource_name_prefix: str,
        driver_labels: dict[str, str],
        submission_spark_conf: SparkConf,
        clock: Clock,
    ):
        self.resource_name_prefix = resource_name_prefix
        self.driver_labels = dict(driver_labels)
        self.submission_spark_conf = submission_spark_conf
        self.clock = clock

    def configure_driver(self, driver_spec: KubernetesDriverSpec) -> KubernetesDriverSpec:
        conf = self.submission_spark_conf
        validation.validate_unset(
            conf.get(constants.DRIVER_BIND_ADDRESS_KEY),
            constants.DRIVER_BIND_ADDRESS_KEY,
            "the driver's bind address is managed and set to the driver pod's IP address.",
        )
        validation.validate_unset(
            conf.get(constants.DRIVER_HOST_KEY),
            constants.DRIVER_HOST_KEY,
            "the driver's hostname will be managed via a Kubernetes service.",
        )

        service_name = resolve_service_name(self.resource_name_prefix, self.clock)

        driver_port = conf.get_int(constants.DRIVER_PORT_KEY, constants.DEFAULT_DRIVER_PORT)
        block_manager_port = conf.get_int(
            constants.DRIVER_BLOCK_MANAGER_PORT_KEY, constants.DEFAULT_BLOCK_MANAGER_PORT
        )
        ui_port = conf.get_int(constants.UI_PORT_KEY, constants.DEFAULT_UI_PORT)
        node_port = conf.get_int(
            constants.KUBERNETES_DRIVER_NODE_PORT_KEY, constants.DEFAULT_NODE_PORT
        )
        driver_service, ui_service = build_driver_services(
            service_name,
            self.driver_labels,
            driver_port,
            block_manager_port,
            ui_port,
            node_port,
        )

        namespace = conf.get(constants.KUBERNETES_NAMESPACE_KEY, constants.DEFAULT_NAMESPACE)
        domain = conf.get(constants.KUBERNETES_SVC_DOMAIN_KEY, constants.DEFAULT_SVC_DOMAIN)
        driver_hostname = get_driver_hostname(driver_service.metadata.name, namespace, domain)

        resolved_spark_conf = driver_spec.driver_spark_conf.set_all(
            {
                constants.DRIVER_HOST_KEY: driver_hostname,
                constants.DRIVER_PORT_KEY: driver_port,
                constants.DRIVER_BLOCK_MANAGER_PORT_KEY: block_manager_port,
            }
        )

        return dataclasses.replace(
            driver_spec,
            driver_spark_conf=resolved_spark_conf,
            other_kubernetes_resources=(
                *driver_spec.other_kubernetes_resources,
                driver_service,
                ui_service,
            ),
        )
