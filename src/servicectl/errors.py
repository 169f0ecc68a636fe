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

"""Common errors raised by functions and methods in the `servicectl` package."""

__all__ = ["DetectionError", "Error", "ExecError", "ExecutableNotFoundError"]


class Error(Exception):
    """Base error used to compose other errors."""

    @property
    def message(self) -> str:
        """Return message passed as first argument to error."""
        return self.args[0]


class DetectionError(Error):
    """Error raised if no supported service manager is detected on the machine."""


class ExecutableNotFoundError(Error):
    """Error raised if the control binary of a detected service manager is not found."""

    def __init__(self, message: str, /, executable: str) -> None:
        super().__init__(message)
        self.executable = executable


class ExecError(Error):
    """Error raised if a service manager command fails.

    Attributes:
        cmd: Command that was run.
        returncode: Exit code of the command. `None` if the command could not be spawned.
        output: Combined standard output and standard error of the command.
        os_error: Underlying OS error if the command could not be spawned.
    """

    def __init__(
        self,
        message: str,
        /,
        cmd: list[str],
        returncode: int | None = None,
        output: str | None = None,
        os_error: OSError | None = None,
    ) -> None:
        super().__init__(message)
        self.cmd = cmd
        self.returncode = returncode
        self.output = output
        self.os_error = os_error
