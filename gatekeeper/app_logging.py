import logging
from typing import Optional

from pythonjsonlogger import jsonlogger

FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'


def setup_logger(level: int = logging.INFO, logfile: Optional[str] = None,
                 json: bool = True) -> None:
    if logfile:
        logHandler: logging.Handler = logging.FileHandler(logfile)
    else:
        logHandler = logging.StreamHandler()
    if json:
        formatter: logging.Formatter = jsonlogger.JsonFormatter(
            FORMAT,
            rename_fields={'levelname': 'level', 'asctime': 'timestamp'}
        )
    else:
        formatter = logging.Formatter(FORMAT)
    logHandler.setFormatter(formatter)
    logger = logging.getLogger('gatekeeper')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.addHandler(logHandler)
    logger.setLevel(level)
