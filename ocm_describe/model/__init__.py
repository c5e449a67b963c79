"""Data models for ocm-describe."""

from .account import Account, Organization, Subscription
from .cluster import Cluster, ObjectReference, ProvisionShard
from .report import NOT_AVAILABLE, ClusterDescription, ReportFormat
from .upgrade import UpgradePolicy, UpgradePolicyState

__all__ = [
    "Account",
    "Organization",
    "Subscription",
    "Cluster",
    "ObjectReference",
    "ProvisionShard",
    "NOT_AVAILABLE",
    "ClusterDescription",
    "ReportFormat",
    "UpgradePolicy",
    "UpgradePolicyState",
]
