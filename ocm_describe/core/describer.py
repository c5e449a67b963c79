"""Cluster description report."""

import json
from typing import Optional

import yaml
from rich.console import Console

from ..model.account import Account, Subscription
from ..model.cluster import Cluster
from ..model.report import NOT_AVAILABLE, ClusterDescription, ReportFormat
from ..ocm import OCMConnection, OCMError
from ..upgrade import find_next_upgrade
from ..utils.logger import get_logger
from ..utils.timefmt import format_rfc3339, round_to_second

logger = get_logger(__name__)


class DescribeError(Exception):
    """A required lookup failed while describing a cluster."""


def _bool(value: bool) -> str:
    return "true" if value else "false"


def _timestamp(value) -> str:
    if value is None:
        return NOT_AVAILABLE
    return format_rfc3339(round_to_second(value))


class ClusterDescriber:
    """Collects and formats the description of a single cluster."""

    def __init__(self, connection: OCMConnection):
        self.connection = connection

    def describe(self, cluster: Cluster) -> ClusterDescription:
        """Gather the details of a cluster and its related records."""
        logger.info(f"Describing cluster '{cluster.id}'")

        subscription = self._get_subscription(cluster.subscription.id)

        account = None
        if subscription is not None:
            account = self._get_account(subscription.creator.id)

        organization = NOT_AVAILABLE
        creator = NOT_AVAILABLE
        email = NOT_AVAILABLE
        if account is not None:
            if account.organization is not None and account.organization.name:
                organization = account.organization.name
            creator = account.username or NOT_AVAILABLE
            email = account.email or NOT_AVAILABLE

        return ClusterDescription(
            id=cluster.id,
            external_id=cluster.external_id,
            name=cluster.full_name,
            api_url=cluster.api.url,
            api_listening=cluster.api.listening,
            console_url=cluster.console.url,
            masters=cluster.nodes.master,
            infra=cluster.nodes.infra,
            computes=cluster.nodes.compute,
            product=cluster.product.id,
            provider=cluster.cloud_provider.id,
            version=cluster.openshift_version,
            region=cluster.region.id,
            multi_az=cluster.multi_az,
            ccs=cluster.ccs.enabled,
            channel_group=cluster.version.channel_group,
            cluster_admin=cluster.cluster_admin_enabled,
            organization=organization,
            creator=creator,
            email=email,
            created=cluster.creation_timestamp,
            expiration=cluster.expiration_timestamp,
            shard=self._get_shard(cluster.id),
            next_upgrade=find_next_upgrade(self.connection, cluster.id),
        )

    def _get_subscription(self, subscription_id: str) -> Optional[Subscription]:
        if not subscription_id:
            return None

        try:
            return self.connection.get_subscription(subscription_id)
        except OCMError as e:
            if e.status == 404:
                logger.info(f"Subscription '{subscription_id}' not found")
                return None
            raise DescribeError(f"can't get subscription '{subscription_id}': {e}") from e

    def _get_account(self, account_id: str) -> Optional[Account]:
        if not account_id:
            return None

        try:
            return self.connection.get_account(account_id)
        except OCMError as e:
            if e.status in (403, 404):
                logger.info(f"Account '{account_id}' not available (status {e.status})")
                return None
            raise DescribeError(f"can't get account '{account_id}': {e}") from e

    def _get_shard(self, cluster_id: str) -> Optional[str]:
        try:
            shard = self.connection.get_provision_shard(cluster_id)
        except OCMError as e:
            logger.debug(f"Can't get provision shard of cluster '{cluster_id}': {e}")
            return None
        return shard.hive_config.server or None

    def format_text(self, description: ClusterDescription) -> str:
        """Format a description as the fixed-layout text report."""
        fields = [
            ("ID", description.id),
            ("External ID", description.external_id),
            ("Name", description.name),
            ("API URL", description.api_url),
            ("API Listening", description.api_listening),
            ("Console URL", description.console_url),
            ("Masters", description.masters),
            ("Infra", description.infra),
            ("Computes", description.computes),
            ("Product", description.product),
            ("Provider", description.provider),
            ("Version", description.version),
            ("Region", description.region),
            ("Multi-az", _bool(description.multi_az)),
            ("CCS", _bool(description.ccs)),
            ("Channel Group", description.channel_group),
            ("Cluster Admin", _bool(description.cluster_admin)),
            ("Organization", description.organization),
            ("Creator", description.creator),
            ("Email", description.email),
            ("Created", _timestamp(description.created)),
            ("Expiration", _timestamp(description.expiration)),
        ]
        if description.shard:
            fields.append(("Shard", description.shard))
        if description.next_upgrade:
            fields.append(("Next Upgrade", description.next_upgrade))

        lines = [""]
        lines.extend(f"{label + ':':<15}{value}" for label, value in fields)
        lines.append("")
        return "\n".join(lines) + "\n"

    def render(self, description: ClusterDescription, output_format: ReportFormat) -> str:
        """Render a description in the requested format."""
        if output_format == ReportFormat.JSON:
            return json.dumps(description.dict(), indent=2, default=str)
        elif output_format == ReportFormat.YAML:
            return yaml.dump(description.dict(), default_flow_style=False, sort_keys=False)
        else:
            return self.format_text(description)


def print_cluster_description(
    connection: OCMConnection,
    cluster: Cluster,
    output_format: ReportFormat = ReportFormat.TEXT,
    console: Optional[Console] = None,
) -> None:
    """Describe a cluster and write the report to standard output.

    Nothing is written when a required lookup fails.
    """
    describer = ClusterDescriber(connection)
    report = describer.render(describer.describe(cluster), output_format)

    console = console or Console()
    console.print(report, end="", markup=False, highlight=False, emoji=False, soft_wrap=True)
