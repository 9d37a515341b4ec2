"""
Logging Setup
Configures loguru sinks for the command line entry points
"""

import os
import sys
from typing import Optional

from loguru import logger


def configure_logging(level: Optional[str] = None):
    """
    Send logs to stderr, plus a rotating file when DEPLOY_LOG_FILE is set

    Stdout stays reserved for the deployment report lines.
    """
    level = level or os.getenv('DEPLOY_LOG_LEVEL', 'INFO')

    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=level
    )

    log_file = os.getenv('DEPLOY_LOG_FILE')
    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}",
            level="DEBUG"
        )
