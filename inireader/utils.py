import logging

logger: logging.Logger = logging.getLogger("inireader")
logger.addHandler(logging.StreamHandler())
# Silent unless the application lowers the level
logger.setLevel(logging.CRITICAL)
