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

"""Call `subprocess` with logging enabled."""

__all__ = ["Runner", "call"]

import logging
import os
import subprocess
from collections.abc import Callable

from ..errors import ExecError

_logger = logging.getLogger(__name__)

Runner = Callable[..., subprocess.CompletedProcess]


def call(root: str, /, *args: str, check: bool = True) -> subprocess.CompletedProcess:
    """Call a command with logging enabled.

    Standard error is merged into standard output so that failures carry
    everything the command printed.

    Args:
        root: The root command to call.
        args: Arguments to pass to the root command.
        check: If set to `True`, raise an error if the command exits with a non-zero exit code.

    Raises:
        ExecError:
            Raised if the command cannot be spawned, or if the called command
            fails and check is set to `True`.
    """
    cmd = [root, *args]
    tool = os.path.basename(root)
    try:
        _logger.debug("running command %s", cmd)
        result = subprocess.run(
            cmd, stdout=subprocess.PIPE, stderr=subprocess.STDOUT, text=True, check=True
        )
    except subprocess.CalledProcessError as e:
        _logger.error(
            "command '%s' failed with:\nexit code %s\noutput: %s",
            " ".join(cmd),
            e.returncode,
            e.stdout,
        )
        if check:
            raise ExecError(
                f"{tool} command '{' '.join(cmd)}' failed with exit code {e.returncode}. "
                + f"reason: {e.stdout.strip() if e.stdout else None}",
                cmd=cmd,
                returncode=e.returncode,
                output=e.stdout,
            ) from e

        result = e
    except OSError as e:
        _logger.error("command '%s' could not be run: %s", " ".join(cmd), e)
        raise ExecError(
            f"{tool} command '{' '.join(cmd)}' could not be run. reason: {e}",
            cmd=cmd,
            os_error=e,
        ) from e

    _logger.debug(
        "command '%s' completed with:\nexit code: %s\noutput: %s",
        " ".join(cmd),
        result.returncode,
        result.stdout,
    )
    return subprocess.CompletedProcess(
        args=cmd,
        stdout=result.stdout.strip() if result.stdout else None,
        returncode=result.returncode,
    )
