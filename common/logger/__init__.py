import logging
import os

from pythonjsonlogger import jsonlogger

logHandler = logging.StreamHandler()
formatter = jsonlogger.JsonFormatter()
logHandler.setFormatter(formatter)
logging.basicConfig(
    level=os.environ.get('LOG_LEVEL', 'DEBUG'),
    handlers=[logHandler]
)
