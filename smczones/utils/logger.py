import logging
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def resolve_level(log_level) -> int:
    """
    Turns a level name ("debug", "INFO") or a logging constant into an int.
    Raises ValueError for names logging does not know.
    """
    if isinstance(log_level, int):
        return log_level
    level = logging.getLevelName(str(log_level).strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    return level


def setup_logger(name="SMCZones", log_level=logging.INFO, log_file=None):
    """
    Configures the package logger. Child loggers (SMCZones.Detector,
    SMCZones.Scanner, ...) propagate to it.

    Calling it again updates the level and swaps the handlers it installed
    earlier, so the CLI can apply .env overrides after a first setup.
    """
    logger = logging.getLogger(name)
    logger.setLevel(resolve_level(log_level))

    for handler in [h for h in logger.handlers if getattr(h, '_smczones', False)]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler._smczones = True
        logger.addHandler(handler)

    return logger
