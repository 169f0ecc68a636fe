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

"""Control a service through the service manager detected on the machine."""

__all__ = ["RESTART_DELAY", "ServiceHandle", "new"]

import logging
import shutil
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from .core import Runner, ServiceManager, call
from .detect import Backend, detect
from .errors import ExecError, ExecutableNotFoundError

_logger = logging.getLogger(__name__)

# Seconds to wait between stopping and starting a service so that the
# operating system can release its sockets and ports.
RESTART_DELAY = 0.05


@dataclass(frozen=True)
class ServiceHandle(ServiceManager):
    """Control a service using the control binary of a service manager.

    Attributes:
        backend: Service manager that controls the service.
        executable: Absolute path to the control binary of the service manager.
        service: Name of the service passed to the control binary.
        runner: Command runner used to call the control binary.
    """

    backend: Backend
    executable: str
    service: str
    runner: Runner = field(default=call, compare=False, repr=False)

    @classmethod
    def from_backend(
        cls,
        backend: Backend,
        service: str,
        /,
        *,
        which: Callable[[str], str | None] | None = None,
        runner: Runner | None = None,
    ) -> "ServiceHandle":
        """Create a handle by resolving the control binary of `backend`.

        Raises:
            ExecutableNotFoundError: Raised if the control binary is not on the search path.
        """
        which = which or shutil.which
        if (executable := which(backend.executable)) is None:
            raise ExecutableNotFoundError(
                f"executable `{backend.executable}` not found. "
                + f"cannot control services managed by {backend.value}",
                executable=backend.executable,
            )

        return cls(backend, executable, service, runner or call)

    def argv(self, action: str, /) -> list[str]:
        """Get the command used to run `action` on the service.

        Raises:
            ValueError: Raised if the service manager has no command for `action`.
        """
        if action not in _ACTIONS[self.backend]:
            raise ValueError(f"{self.backend.value} has no `{action}` command")

        return _ARGV[self.backend](self.executable, self.service, action)

    def start(self) -> None:
        """Start service."""
        self._run("start")

    def stop(self) -> None:
        """Stop service."""
        self._run("stop")

    def restart(self) -> None:
        """Restart service."""
        _RESTART[self.backend](self)

    def _run(self, action: str) -> None:
        self.runner(*self.argv(action))


def _subcommand_first(executable: str, service: str, action: str) -> list[str]:
    return [executable, action, service]


def _service_first(executable: str, service: str, action: str) -> list[str]:
    return [executable, service, action]


def _restart_native(handle: ServiceHandle) -> None:
    handle._run("restart")


def _restart_ignore_stop_error(handle: ServiceHandle) -> None:
    try:
        handle.stop()
    except ExecError as e:
        # Service may not be running.
        _logger.debug("ignoring failure to stop service '%s': %s", handle.service, e.message)

    time.sleep(RESTART_DELAY)
    handle.start()


def _restart_stop_then_start(handle: ServiceHandle) -> None:
    handle.stop()
    time.sleep(RESTART_DELAY)
    handle.start()


_ARGV = {
    Backend.SYSTEMD: _subcommand_first,
    Backend.UPSTART: _subcommand_first,
    Backend.SYSV: _service_first,
}

_ACTIONS = {
    Backend.SYSTEMD: ("start", "stop", "restart"),
    Backend.UPSTART: ("start", "stop"),
    Backend.SYSV: ("start", "stop"),
}

_RESTART = {
    Backend.SYSTEMD: _restart_native,
    Backend.UPSTART: _restart_ignore_stop_error,
    Backend.SYSV: _restart_stop_then_start,
}


def new(
    service: str,
    /,
    *,
    exists: Callable[[str], bool] | None = None,
    which: Callable[[str], str | None] | None = None,
    runner: Runner | None = None,
) -> ServiceHandle:
    """Create a handle for `service` using the service manager detected on the machine.

    Args:
        service: Name of the service to control.
        exists: Predicate used to check if a path exists. Defaults to `os.path.exists`.
        which: Function used to resolve control binaries. Defaults to `shutil.which`.
        runner: Command runner used to call control binaries. Defaults to `call`.

    Raises:
        DetectionError: Raised if no supported service manager is detected.
        ExecutableNotFoundError: Raised if the control binary is not on the search path.
    """
    backend = detect(exists=exists, runner=runner)
    handle = ServiceHandle.from_backend(backend, service, which=which, runner=runner)
    _logger.debug(
        "controlling service '%s' with %s (%s)", service, handle.executable, backend.value
    )
    return handle
