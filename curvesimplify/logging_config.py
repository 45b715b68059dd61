"""
Console logging for the scripts. Library modules only create loggers under
'curvesimplify' and emit DEBUG records; handlers are installed here.
"""
import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Attach a single stream handler (stdout by default) to the 'curvesimplify'
    logger. Calling it again replaces the previous handler.
    """
    logger = logging.getLogger("curvesimplify")
    logger.setLevel(level)
    logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    return logger
