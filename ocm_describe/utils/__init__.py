"""Shared helpers."""

from .logger import get_logger, set_log_level
from .timefmt import format_duration, format_rfc3339, round_to_second

__all__ = ["get_logger", "set_log_level", "format_duration", "format_rfc3339", "round_to_second"]
