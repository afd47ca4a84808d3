"""
Logging setup for the server process
"""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Console logging for the whole process (no-op once the root logger has handlers)"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
