import logging
from typing import Optional, Union

from .constants.constants import LOG_FORMAT
from .settings import settings


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """Install the root handler and format.

    The package only creates module loggers; an application embedding the
    engine calls this once at start-up, before the first ``analyze``.
    """
    resolved = level if level is not None else settings.log_level
    if isinstance(resolved, str):
        resolved = resolved.upper()

    logging.basicConfig(level=resolved, format=LOG_FORMAT, force=True)
    logging.getLogger(__name__).debug(f"Logging configured at level {resolved}")
