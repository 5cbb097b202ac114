import logging, json, sys, time, os

from sshca_core.config import get_settings


def get_logger(name="sshca", level=None, to_file=None):
    """
    Structured JSON logger shared by all sshca_core components.

    level and to_file fall back to SSHCA_LOG_LEVEL and SSHCA_LOG_FILE.
    Handlers are attached once per logger name.
    """
    logger = logging.getLogger(name)
    settings = get_settings()
    if level is None:
        level = settings.SSHCA_LOG_LEVEL
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(level)

    if to_file is None:
        to_file = settings.SSHCA_LOG_FILE

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            fmt=json.dumps({
                "ts": "%(asctime)s",
                "level": "%(levelname)s",
                "name": "%(name)s",
                "msg": "%(message)s"
            }),
            datefmt="%Y-%m-%dT%H:%M:%SZ",
        )
        formatter.converter = time.gmtime  # UTC timestamps
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        if to_file:
            os.makedirs(os.path.dirname(to_file) or ".", exist_ok=True)
            file_handler = logging.FileHandler(to_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
