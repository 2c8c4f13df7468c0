# Copyright (c) Microsoft. All rights reserved.

from ._models import *  # noqa: F403
from ._operations import *  # noqa: F403
from ._provider import *  # noqa: F403
