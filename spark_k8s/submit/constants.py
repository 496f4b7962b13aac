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

"""Constants for the Kubernetes driver submission steps."""

# Spark configuration keys read or written by the driver service step
DRIVER_BIND_ADDRESS_KEY = "spark.driver.bindAddress"
DRIVER_HOST_KEY = "spark.driver.host"
DRIVER_PORT_KEY = "spark.driver.port"
DRIVER_BLOCK_MANAGER_PORT_KEY = "spark.driver.blockManager.port"
UI_PORT_KEY = "spark.ui.port"
KUBERNETES_DRIVER_NODE_PORT_KEY = "spark.kubernetes.driver.nodeport"
KUBERNETES_NAMESPACE_KEY = "spark.kubernetes.namespace"
KUBERNETES_SVC_DOMAIN_KEY = "spark.kubernetes.svc.domain"

# Default values
DEFAULT_DRIVER_PORT = 7078
DEFAULT_BLOCK_MANAGER_PORT = 7079
DEFAULT_UI_PORT = 4040
DEFAULT_NODE_PORT = 0  # 0 lets Kubernetes allocate the node port
DEFAULT_NAMESPACE = "default"
DEFAULT_SVC_DOMAIN = "svc.cluster.local"

# Service naming; other cluster tooling matches on these exact strings
DRIVER_SVC_POSTFIX = "-driver-svc"
FALLBACK_SVC_PREFIX = "spark-"
UI_SVC_POSTFIX = "-ui"
DRIVER_PORT_NAME = "driver-rpc-port"
BLOCK_MANAGER_PORT_NAME = "block-manager-port"
UI_PORT_NAME = "driver-ui-port"

# DNS-1123 label limit
DNS_LABEL_MAX_LENGTH = 63
# Leaves room for UI_SVC_POSTFIX on the derived UI service name
MAX_SERVICE_NAME_LENGTH = 59

# Service types
HEADLESS_CLUSTER_IP = "None"
NODE_PORT_SERVICE_TYPE = "NodePort"
