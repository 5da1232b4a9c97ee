import logging

logger = logging.getLogger("microstates")
# logging.basicConfig(level=logging.WARNING, format='%(levelname)s:%(name)s:%(message)s')


def configure_logging(level: int = logging.INFO) -> None:
    """Attach a stream handler to the package logger.

    Used by the command line entry point.

    Args:
        level: Logging level for the package logger.
    """
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s:%(name)s:%(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level)
