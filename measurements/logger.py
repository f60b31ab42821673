"""Package logger.

The library only emits records; configuring handlers is left to the
application (the command line front end installs a rich handler).
"""

import logging

__all__ = ["logger"]

logger = logging.getLogger("measurements")
logger.addHandler(logging.NullHandler())
