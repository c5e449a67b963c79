"""Fake OCM API and record builders shared by the tests."""

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple, Union

import httpx

from ocm_describe.ocm import OCMConnection

CLUSTERS = "/api/clusters_mgmt/v1/clusters"
SUBSCRIPTIONS = "/api/accounts_mgmt/v1/subscriptions"
ACCOUNTS = "/api/accounts_mgmt/v1/accounts"

Route = Union[Tuple[int, Any], Exception]


class FakeOCM:
    """In-memory OCM API served through an httpx mock transport.

    Routes map a request path to either a ``(status, body)`` pair or an
    exception raised by the transport. Unknown paths answer 404.
    """

    def __init__(self, routes: Optional[Dict[str, Route]] = None):
        self.routes: Dict[str, Route] = dict(routes or {})
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)

        if route is None:
            return httpx.Response(404, json={"kind": "Error", "id": "404", "reason": "Not found"})
        if isinstance(route, Exception):
            raise route

        status, body = route
        return httpx.Response(status, json=body)

    def connection(self) -> OCMConnection:
        return OCMConnection(
            url="https://api.example.com",
            token="test-token",
            transport=httpx.MockTransport(self.handler),
        )

    def paths(self) -> List[str]:
        return [request.url.path for request in self.requests]


def error_body(status: int, reason: str) -> Tuple[int, Dict[str, Any]]:
    """OCM style error response."""
    return status, {"kind": "Error", "id": str(status), "reason": reason}


def policy(policy_id: str, version: str, next_run: datetime) -> Dict[str, Any]:
    """Upgrade policy record."""
    return {
        "kind": "UpgradePolicy",
        "id": policy_id,
        "version": version,
        "schedule_type": "manual",
        "next_run": next_run.isoformat(),
    }


def policy_list(*items: Dict[str, Any]) -> Tuple[int, Dict[str, Any]]:
    return 200, {
        "kind": "UpgradePolicyList",
        "page": 1,
        "size": len(items),
        "total": len(items),
        "items": list(items),
    }
