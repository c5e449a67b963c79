"""Upgrade schedule lookup."""

from .resolver import NONE_SCHEDULED, find_next_upgrade, nearest_upgrade_policy

__all__ = ["NONE_SCHEDULED", "find_next_upgrade", "nearest_upgrade_policy"]
