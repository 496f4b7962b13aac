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

import pytest

from spark_k8s.common.clock import ManualClock
from spark_k8s.submit.utils import get_resource_name_prefix
from spark_k8s.test.common import FIXED_TIME_MILLIS, TestCase


@pytest.mark.parametrize(
    "test_case",
    [
        TestCase(name="simple", config={"app_name": "job"}, expected_output="job-1600000000000"),
        TestCase(
            name="upper case and dots",
            config={"app_name": "My.App"},
            expected_output="my-app-1600000000000",
        ),
        TestCase(
            name="surrounding whitespace",
            config={"app_name": " etl "},
            expected_output="etl-1600000000000",
        ),
    ],
)
def test_get_resource_name_prefix(test_case: TestCase):
    print("Executing test:", test_case.name)
    prefix = get_resource_name_prefix(test_case.config["app_name"], ManualClock(FIXED_TIME_MILLIS))
    assert prefix == test_case.expected_output
    print("test execution complete")
