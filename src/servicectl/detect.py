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

"""Detect the service manager running on the machine.

Three service managers are recognized. They are checked in a fixed order
and the first match wins, so a machine carrying artifacts of more than one
service manager resolves to `systemd` first, then `upstart`, then SysV init.

### Example Usage:

```python3
from servicectl.detect import Backend, detect

if detect() is Backend.SYSTEMD:
    ...
```
"""

__all__ = [
    "Backend",
    "INIT_PATH",
    "SYSTEMD_MARKER",
    "SYSV_MARKER",
    "UPSTART_MARKER",
    "UPSTART_SIGNATURE",
    "detect",
    "is_systemd",
    "is_sysv",
    "is_upstart",
]

import logging
import os
from collections.abc import Callable
from enum import Enum

from .core import Runner, call
from .errors import DetectionError, ExecError

_logger = logging.getLogger(__name__)

SYSTEMD_MARKER = "/run/systemd/system"
UPSTART_MARKER = "/sbin/upstart-udev-bridge"
INIT_PATH = "/sbin/init"
UPSTART_SIGNATURE = "init (upstart"
SYSV_MARKER = "/usr/sbin/service"


class Backend(str, Enum):
    """Service managers that can be detected on a machine."""

    SYSTEMD = "systemd"
    UPSTART = "upstart"
    SYSV = "sysv"

    @property
    def executable(self) -> str:
        """Get the name of the control binary for this service manager."""
        return _EXECUTABLES[self]


_EXECUTABLES = {
    Backend.SYSTEMD: "systemctl",
    Backend.UPSTART: "initctl",
    Backend.SYSV: "service",
}


def is_systemd(*, exists: Callable[[str], bool] | None = None) -> bool:
    """Check if `systemd` has booted the machine."""
    exists = exists or os.path.exists
    return exists(SYSTEMD_MARKER)


def is_upstart(
    *, exists: Callable[[str], bool] | None = None, runner: Runner | None = None
) -> bool:
    """Check if `upstart` is the service manager of the machine.

    Notes:
        - `/sbin/init --version` is only run if the `upstart` udev bridge is missing.
    """
    exists = exists or os.path.exists
    runner = runner or call
    if exists(UPSTART_MARKER):
        return True

    if not exists(INIT_PATH):
        return False

    try:
        result = runner(INIT_PATH, "--version", check=False)
    except ExecError as e:
        _logger.debug("could not query version of %s. reason: %s", INIT_PATH, e.message)
        return False

    if result.returncode != 0:
        _logger.debug("%s --version exited with code %s", INIT_PATH, result.returncode)
        return False

    return UPSTART_SIGNATURE in (result.stdout or "")


def is_sysv(*, exists: Callable[[str], bool] | None = None) -> bool:
    """Check if the SysV init `service` command is installed."""
    exists = exists or os.path.exists
    return exists(SYSV_MARKER)


def detect(
    *, exists: Callable[[str], bool] | None = None, runner: Runner | None = None
) -> Backend:
    """Detect the service manager of the machine.

    Args:
        exists: Predicate used to check if a path exists. Defaults to `os.path.exists`.
        runner: Command runner used to query `/sbin/init`. Defaults to `call`.

    Raises:
        DetectionError: Raised if no supported service manager is detected.
    """
    if is_systemd(exists=exists):
        backend = Backend.SYSTEMD
    elif is_upstart(exists=exists, runner=runner):
        backend = Backend.UPSTART
    elif is_sysv(exists=exists):
        backend = Backend.SYSV
    else:
        raise DetectionError(
            "cannot detect service manager. "
            + f"checked for systemd ({SYSTEMD_MARKER}), "
            + f"upstart ({UPSTART_MARKER}, {INIT_PATH} --version), "
            + f"and sysv ({SYSV_MARKER})"
        )

    _logger.debug("detected service manager '%s'", backend.value)
    return backend
