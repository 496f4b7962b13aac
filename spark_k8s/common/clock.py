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

"""Time sources for submission steps."""

import abc
import time


class Clock(abc.ABC):
    """Abstract time source.

    Submission steps take a Clock instead of reading the system time so that
    time-derived names are reproducible in tests.
    """

    @abc.abstractmethod
    def get_time_millis(self) -> int:
        """Return the current time in milliseconds since the epoch."""
        raise NotImplementedError()


class SystemClock(Clock):
    """Clock backed by the system wall clock."""

    def get_time_millis(self) -> int:
        return int(time.time() * 1000)


class ManualClock(Clock):
    """Clock whose time only changes when told to.

    Args:
        time_millis: Initial time in milliseconds.
    """

    def __init__(self, time_millis: int = 0):
        self._time_millis = time_millis

    def get_time_millis(self) -> int:
        return self._time_millis

    def set_time(self, time_millis: int) -> None:
        self._time_millis = time_millis

    def advance(self, millis: int) -> None:
        self._time_millis += millis
