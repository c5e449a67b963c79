"""Upgrade policy models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class UpgradePolicy(BaseModel):
    """Scheduled upgrade of a cluster to a target version."""

    id: str
    version: str = ""
    next_run: Optional[datetime] = None
    schedule_type: Optional[str] = None
    schedule: Optional[str] = None


class UpgradePolicyState(BaseModel):
    """Current state of an upgrade policy."""

    value: str = ""
    description: Optional[str] = None
