"""Report-related models."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel

NOT_AVAILABLE = "N/A"


class ReportFormat(str, Enum):
    """Supported report formats."""

    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


class ClusterDescription(BaseModel):
    """Everything collected about a cluster for its description."""

    id: str
    external_id: str = ""
    name: str
    api_url: str = ""
    api_listening: str = ""
    console_url: str = ""
    masters: int = 0
    infra: int = 0
    computes: int = 0
    product: str = ""
    provider: str = ""
    version: str = ""
    region: str = ""
    multi_az: bool = False
    ccs: bool = False
    channel_group: str = ""
    cluster_admin: bool = False
    organization: str = NOT_AVAILABLE
    creator: str = NOT_AVAILABLE
    email: str = NOT_AVAILABLE
    created: Optional[datetime] = None
    expiration: Optional[datetime] = None
    shard: Optional[str] = None
    next_upgrade: str = ""
