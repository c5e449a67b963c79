"""OpenShift Cluster Manager access."""

from .client import OCMConnection
from .errors import ClusterNotFoundError, OCMError

__all__ = ["OCMConnection", "OCMError", "ClusterNotFoundError"]
