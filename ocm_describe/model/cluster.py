"""Cluster-related models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ObjectReference(BaseModel):
    """Reference to another object by identifier."""

    id: str = ""
    href: Optional[str] = None


class ClusterAPI(BaseModel):
    """API server endpoint of a cluster."""

    url: str = ""
    listening: str = ""


class ClusterConsole(BaseModel):
    url: str = ""


class ClusterDNS(BaseModel):
    base_domain: str = ""


class ClusterNodes(BaseModel):
    """Node counts per role."""

    master: int = 0
    infra: int = 0
    compute: int = 0


class ClusterCCS(BaseModel):
    enabled: bool = False


class ClusterVersion(BaseModel):
    """OpenShift version information."""

    id: str = ""
    raw_id: str = ""
    channel_group: str = ""


class Cluster(BaseModel):
    """Cluster record as returned by the clusters management service."""

    id: str = ""
    external_id: str = ""
    name: str = ""
    api: ClusterAPI = Field(default_factory=ClusterAPI)
    console: ClusterConsole = Field(default_factory=ClusterConsole)
    dns: ClusterDNS = Field(default_factory=ClusterDNS)
    nodes: ClusterNodes = Field(default_factory=ClusterNodes)
    product: ObjectReference = Field(default_factory=ObjectReference)
    cloud_provider: ObjectReference = Field(default_factory=ObjectReference)
    openshift_version: str = ""
    region: ObjectReference = Field(default_factory=ObjectReference)
    multi_az: bool = False
    ccs: ClusterCCS = Field(default_factory=ClusterCCS)
    version: ClusterVersion = Field(default_factory=ClusterVersion)
    cluster_admin_enabled: bool = False
    creation_timestamp: Optional[datetime] = None
    expiration_timestamp: Optional[datetime] = None
    subscription: ObjectReference = Field(default_factory=ObjectReference)

    @property
    def full_name(self) -> str:
        """Cluster name qualified with its DNS base domain."""
        return f"{self.name}.{self.dns.base_domain}"


class HiveConfig(BaseModel):
    server: str = ""


class ProvisionShard(BaseModel):
    """Provisioning shard a cluster is assigned to."""

    id: str = ""
    hive_config: HiveConfig = Field(default_factory=HiveConfig)
