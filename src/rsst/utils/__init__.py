"""Utils package."""

from rsst.utils.dates import format_rfc2822, parse_rfc2822
from rsst.utils.http_client import create_http_client
from rsst.utils.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "create_http_client",
    "format_rfc2822",
    "parse_rfc2822",
]
