"""Test configuration and fixtures."""

from datetime import datetime, timezone
from typing import Any, Dict

import pytest

from ocm_describe.model.cluster import Cluster

from .fakes import FakeOCM


@pytest.fixture
def fake_ocm():
    """Fake OCM API without routes; tests register the ones they need."""
    return FakeOCM()


@pytest.fixture
def connection(fake_ocm):
    conn = fake_ocm.connection()
    yield conn
    conn.close()


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 2, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_cluster_data() -> Dict[str, Any]:
    """Sample cluster record as returned by the clusters service."""
    return {
        "kind": "Cluster",
        "id": "1a2b3c",
        "external_id": "c7d2e8f4-0000-4c1e-9a3e-1f2b3c4d5e6f",
        "name": "my-cluster",
        "api": {
            "url": "https://api.my-cluster.abcd.p1.openshiftapps.com:6443",
            "listening": "external",
        },
        "console": {
            "url": "https://console-openshift-console.apps.my-cluster.abcd.p1.openshiftapps.com"
        },
        "dns": {"base_domain": "abcd.p1.openshiftapps.com"},
        "nodes": {"master": 3, "infra": 2, "compute": 4},
        "product": {"id": "osd"},
        "cloud_provider": {"id": "aws"},
        "openshift_version": "4.14.8",
        "region": {"id": "us-east-1"},
        "multi_az": True,
        "ccs": {"enabled": False},
        "version": {"id": "openshift-v4.14.8", "channel_group": "stable"},
        "cluster_admin_enabled": True,
        "creation_timestamp": "2024-01-15T10:20:30.600000Z",
        "expiration_timestamp": "2024-03-15T10:20:30Z",
        "subscription": {"id": "sub-1"},
    }


@pytest.fixture
def sample_cluster(sample_cluster_data) -> Cluster:
    return Cluster(**sample_cluster_data)
