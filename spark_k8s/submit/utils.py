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

from spark_k8s.common.clock import Clock
from spark_k8s.submit.types import validation


def get_resource_name_prefix(app_name: str, clock: Clock) -> str:
    """Build the prefix shared by an application's Kubernetes resources.

    The launch time keeps prefixes of repeated submissions of one application apart.

    Args:
        app_name: Spark application name.
        clock: Time source for the launch time.

    Returns:
        Prefix like "my-app-1600000000000".

    Raises:
        ValidationError: If app_name is empty.
    """
    validation.validate_app_name(app_name)
    prefix = f"{app_name.strip()}-{clock.get_time_millis()}"
    return prefix.lower().replace(".", "-")
