"""OCM REST client wrapper."""

from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from ..model.account import Account, Subscription
from ..model.cluster import Cluster, ProvisionShard
from ..model.upgrade import UpgradePolicy, UpgradePolicyState
from ..utils.logger import get_logger
from .errors import ClusterNotFoundError, OCMError

logger = get_logger(__name__)

DEFAULT_URL = "https://api.openshift.com"
CLUSTERS_PATH = "/api/clusters_mgmt/v1/clusters"
SUBSCRIPTIONS_PATH = "/api/accounts_mgmt/v1/subscriptions"
ACCOUNTS_PATH = "/api/accounts_mgmt/v1/accounts"
PAGE_SIZE = 100

ModelT = TypeVar("ModelT", bound=BaseModel)


class OCMConnection:
    """Read-only connection to the OpenShift Cluster Manager API."""

    def __init__(
        self,
        url: str = DEFAULT_URL,
        token: Optional[str] = None,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.url = url.rstrip("/")
        self._owns_client = client is None

        if client is None:
            headers = {"Accept": "application/json"}
            if token:
                headers["Authorization"] = f"Bearer {token}"
            client = httpx.Client(
                base_url=self.url,
                headers=headers,
                timeout=httpx.Timeout(timeout),
                transport=transport,
            )
        self.client = client

    def __enter__(self) -> "OCMConnection":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        """Close the HTTP client if this connection created it."""
        if self._owns_client:
            self.client.close()

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Send a GET request and return the decoded JSON body."""
        logger.debug(f"GET {path} params={params}")

        try:
            response = self.client.get(path, params=params)
        except httpx.HTTPError as e:
            raise OCMError(f"request to '{path}' failed: {e}") from e

        logger.debug(f"GET {path} returned {response.status_code}")
        if response.is_error:
            raise OCMError.from_response(response)

        try:
            body = response.json()
        except ValueError as e:
            raise OCMError(
                f"can't decode response from '{path}': {e}", status=response.status_code
            ) from e

        if not isinstance(body, dict):
            raise OCMError(
                f"unexpected response from '{path}': expected an object",
                status=response.status_code,
            )
        return body

    def _parse(self, model: Type[ModelT], data: Dict[str, Any], path: str) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise OCMError(f"invalid {model.__name__} returned by '{path}': {e}") from e

    def _get_object(self, model: Type[ModelT], path: str) -> ModelT:
        return self._parse(model, self._get(path), path)

    def _list_items(self, path: str, params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        """Collect the items of every page of a collection."""
        items: List[Dict[str, Any]] = []
        page = 1

        while True:
            query = dict(params or {})
            query.update({"page": page, "size": PAGE_SIZE})
            body = self._get(path, query)

            page_items = body.get("items") or []
            if not isinstance(page_items, list):
                raise OCMError(f"unexpected response from '{path}': items must be a list")
            items.extend(page_items)

            total = body.get("total")
            if len(page_items) < PAGE_SIZE or (total is not None and len(items) >= total):
                break
            page += 1

        return items

    def get_cluster(self, cluster_id: str) -> Cluster:
        """Get a cluster by its identifier."""
        return self._get_object(Cluster, f"{CLUSTERS_PATH}/{cluster_id}")

    def find_cluster(self, key: str) -> Cluster:
        """Find a single cluster by identifier, name or external identifier."""
        quoted = key.replace("'", "''")
        search = f"id = '{quoted}' or name = '{quoted}' or external_id = '{quoted}'"
        items = self._list_items(CLUSTERS_PATH, {"search": search})

        if not items:
            raise ClusterNotFoundError(key)
        if len(items) > 1:
            raise OCMError(f"there are {len(items)} clusters with identifier or name '{key}'")

        return self._parse(Cluster, items[0], CLUSTERS_PATH)

    def get_subscription(self, subscription_id: str) -> Subscription:
        """Get a subscription by its identifier."""
        return self._get_object(Subscription, f"{SUBSCRIPTIONS_PATH}/{subscription_id}")

    def get_account(self, account_id: str) -> Account:
        """Get an account by its identifier."""
        return self._get_object(Account, f"{ACCOUNTS_PATH}/{account_id}")

    def get_provision_shard(self, cluster_id: str) -> ProvisionShard:
        """Get the provisioning shard a cluster is assigned to."""
        return self._get_object(ProvisionShard, f"{CLUSTERS_PATH}/{cluster_id}/provision_shard")

    def list_upgrade_policies(self, cluster_id: str) -> List[UpgradePolicy]:
        """List all upgrade policies of a cluster."""
        path = f"{CLUSTERS_PATH}/{cluster_id}/upgrade_policies"
        return [self._parse(UpgradePolicy, item, path) for item in self._list_items(path)]

    def get_upgrade_policy_state(self, cluster_id: str, policy_id: str) -> UpgradePolicyState:
        """Get the current state of an upgrade policy."""
        return self._get_object(
            UpgradePolicyState,
            f"{CLUSTERS_PATH}/{cluster_id}/upgrade_policies/{policy_id}/state",
        )
