import logging

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"


def setup_logging(level: str | None = None) -> None:
    """
    Configure process-wide logging.

    The level comes from `LOG_LEVEL` unless given explicitly. Client
    libraries are kept at WARNING so request logs do not drown the
    per-station messages.
    """
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
