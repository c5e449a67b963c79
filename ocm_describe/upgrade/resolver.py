"""Next scheduled upgrade lookup."""

from datetime import datetime, timezone
from typing import List, Optional

from ..model.report import NOT_AVAILABLE
from ..model.upgrade import UpgradePolicy
from ..ocm import OCMConnection, OCMError
from ..utils.logger import get_logger
from ..utils.timefmt import format_duration, format_rfc3339

logger = get_logger(__name__)

NONE_SCHEDULED = "none scheduled"

# A policy without a next run sorts before every scheduled one.
UNSCHEDULED = datetime.min.replace(tzinfo=timezone.utc)


def _as_utc(value: Optional[datetime]) -> datetime:
    if value is None:
        return UNSCHEDULED
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def nearest_upgrade_policy(policies: List[UpgradePolicy]) -> Optional[UpgradePolicy]:
    """Return the policy with the earliest next run.

    Only a strictly earlier run replaces the current candidate, so the first
    policy wins when several share the earliest time.
    """
    if not policies:
        return None

    nearest = policies[0]
    for policy in policies:
        if _as_utc(policy.next_run) < _as_utc(nearest.next_run):
            nearest = policy
    return nearest


def find_next_upgrade(
    connection: OCMConnection, cluster_id: str, now: Optional[datetime] = None
) -> str:
    """Describe the next scheduled upgrade of a cluster.

    Returns an empty string when the upgrade policies can't be listed.
    """
    try:
        policies = connection.list_upgrade_policies(cluster_id)
    except OCMError as e:
        logger.debug(f"Can't list upgrade policies of cluster '{cluster_id}': {e}")
        return ""

    nearest = nearest_upgrade_policy(policies)
    if nearest is None:
        return NONE_SCHEDULED

    scheduled = format_rfc3339(nearest.next_run, default=NOT_AVAILABLE)

    try:
        state = connection.get_upgrade_policy_state(cluster_id, nearest.id)
    except OCMError as e:
        logger.debug(f"Can't get state of upgrade policy '{nearest.id}': {e}")
        return f"version {nearest.version} at {scheduled}"

    now = _as_utc(now or datetime.now(timezone.utc))
    next_run = _as_utc(nearest.next_run)

    countdown = ""
    if now < next_run:
        countdown = f"({format_duration(next_run - now)} from now)"
    return f"{state.value} for version {nearest.version} at {scheduled} {countdown}"
