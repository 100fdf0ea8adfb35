import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, stream=sys.stdout)
    logging.getLogger().setLevel(level.upper())

    # httpx 每个请求都会打 INFO 日志
    logging.getLogger("httpx").setLevel(logging.WARNING)
