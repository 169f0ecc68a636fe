# Copyright 2025 Canonical Ltd.
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

"""Unit tests for the errors raised by the `servicectl` package."""

import pytest

from servicectl import DetectionError, Error, ExecError, ExecutableNotFoundError


@pytest.mark.parametrize(
    "error",
    (
        pytest.param(DetectionError("error message!"), id="detection"),
        pytest.param(
            ExecutableNotFoundError("error message!", executable="initctl"), id="not found"
        ),
        pytest.param(ExecError("error message!", cmd=["service", "ssm", "stop"]), id="exec"),
    ),
)
def test_error_message(error: Error) -> None:
    """Test that errors store the correct message."""
    assert isinstance(error, Error)
    assert error.message == "error message!"


def test_exec_error_attributes() -> None:
    """Test that `ExecError` keeps the details of the failed command."""
    os_error = PermissionError(13, "Permission denied")
    error = ExecError("error message!", cmd=["initctl", "stop", "ssm"], os_error=os_error)
    assert error.cmd == ["initctl", "stop", "ssm"]
    assert error.returncode is None
    assert error.output is None
    assert error.os_error is os_error
