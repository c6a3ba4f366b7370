import logging
import socket
from datetime import datetime

from ..config import Settings
from ..models import StatusReport

logger = logging.getLogger(__name__)

HOSTNAME_UNAVAILABLE = "unavailable"


def lookup_hostname() -> str:
    try:
        return socket.gethostname()
    except OSError as exc:
        logger.warning("Hostname lookup failed: %s", exc)
        return HOSTNAME_UNAVAILABLE


def server_time(now: datetime | None = None) -> str:
    """RFC 3339 timestamp with the local UTC offset, e.g. 2025-01-02T10:00:00-03:00."""
    now = now or datetime.now()
    return now.astimezone().isoformat(timespec="seconds")


def build_status(settings: Settings) -> StatusReport:
    return StatusReport(
        status="ok",
        version=settings.app_version,
        server_time=server_time(),
        hostname=lookup_hostname(),
    )
