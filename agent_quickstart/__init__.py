# Copyright (c) Microsoft. All rights reserved.

from ._agent import *  # noqa: F403
from ._clients import *  # noqa: F403
from ._console import *  # noqa: F403
from ._hosted_tools import *  # noqa: F403
from ._logging import *  # noqa: F403
from ._settings import *  # noqa: F403
from ._version import __version__
from .exceptions import *  # noqa: F403
