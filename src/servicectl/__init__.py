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

"""Start, stop, and restart services under systemd, upstart, or SysV init.

### Example Usage:

```python3
import servicectl

handle = servicectl.new("amazon-ssm-agent")
handle.restart()
```
"""

__all__ = [
    # From `core` module
    "ServiceManager",
    "call",
    # From `detect.py`
    "Backend",
    "detect",
    # From `errors.py`
    "DetectionError",
    "Error",
    "ExecError",
    "ExecutableNotFoundError",
    # From `handle.py`
    "ServiceHandle",
    "new",
]

from servicectl.core import ServiceManager, call
from servicectl.detect import Backend, detect
from servicectl.errors import DetectionError, Error, ExecError, ExecutableNotFoundError
from servicectl.handle import ServiceHandle, new
