"""
Process-level logging setup for entry points.

Library modules only call ``logging.getLogger(__name__)``; the command line
tool (or a host application) calls ``configure_logging`` once at startup.
"""
import logging
import logging.config
import os
from typing import Optional, Union

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Configure logging from LOGGING_CONFIG if set, otherwise basicConfig.

    Args:
        level: Explicit level overriding LOG_LEVEL (ignored when LOGGING_CONFIG is used)
    """
    log_conf = os.environ.get('LOGGING_CONFIG')
    if log_conf:
        logging.config.fileConfig(log_conf, disable_existing_loggers=False)
        return

    if level is None:
        level = os.environ.get('LOG_LEVEL', 'INFO')
    if isinstance(level, str):
        level = level.upper()

    logging.basicConfig(level=level, format=DEFAULT_FORMAT)
