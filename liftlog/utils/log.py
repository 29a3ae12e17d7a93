import logging
import os
import sys

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# AWS SDK chatter stays at INFO even when LOG_LEVEL=DEBUG
QUIET_LOGGERS = ("botocore", "boto3", "urllib3")

_HANDLER_NAME = "liftlog-stdout"


def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """
    Send everything to stdout in one format. Safe to call more than once:
    the stdout handler is only installed the first time.
    """
    root = logging.getLogger()
    root.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(FORMAT))
        root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(logging.INFO, root.level))

    app_logger = logging.getLogger("liftlog")
    app_logger.setLevel(level)
    return app_logger


logger = configure_logging()
logger.debug(f"Logger initialised level={LOG_LEVEL}")
