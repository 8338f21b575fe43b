import logging
import os

GSHEETS_CONNECTION = os.getenv("ATTENDANCE_GSHEETS_CONNECTION", "gsheets")
CACHE_TTL_SECONDS = int(os.getenv("ATTENDANCE_CACHE_TTL", "300"))  # 5분
LOG_LEVEL = os.getenv("ATTENDANCE_LOG_LEVEL", "INFO").upper()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level=None):
    """루트 로거에 핸들러가 없을 때만 기본 설정을 한다."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level or LOG_LEVEL, format=LOG_FORMAT)
    logging.getLogger("attendance").setLevel(level or LOG_LEVEL)
