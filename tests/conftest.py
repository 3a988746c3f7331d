"""Shared test fixtures for Coverage Sunburst tests."""

import json
from datetime import date

import pytest

from coverage_sunburst.config import SunburstConfig
from coverage_sunburst.context import SunburstContext
from coverage_sunburst.models import Endpoint, Filters, Release


@pytest.fixture
def endpoints():
    """A small catalog across three levels, in catalog order."""
    return (
        Endpoint(
            "readCoreV1Pod",
            "stable",
            "core",
            path="/api/v1/namespaces/{namespace}/pods/{name}",
            description="read the specified Pod",
            tested=True,
            conf_tested=True,
            k8s_group="",
            k8s_version="v1",
            k8s_kind="Pod",
        ),
        Endpoint("listCoreV1Pod", "stable", "core", tested=True, conf_tested=False),
        Endpoint("deleteCoreV1Pod", "stable", "core", tested=False, conf_tested=False),
        Endpoint(
            "createAppsV1Deployment",
            "stable",
            "apps",
            tested=True,
            conf_tested=True,
            k8s_group="apps",
        ),
        Endpoint("patchAppsV1Deployment", "stable", "apps", tested=False),
        Endpoint("readBatchV1beta1CronJob", "beta", "batch", tested=False),
        Endpoint("createBatchV1beta1CronJob", "beta", "batch", tested=True),
        Endpoint("listPolicyV1alpha1Thing", "alpha", "policy", tested=False),
    )


@pytest.fixture
def release(endpoints):
    return Release(
        release="1.19.0",
        spec="https://example.invalid/swagger.json",
        source="audit-logs",
        release_date=date(2020, 8, 26),
        endpoints=endpoints,
    )


@pytest.fixture
def config():
    return SunburstConfig(releases=["1.19.0", "1.18.0"])


@pytest.fixture
def ctx(config, release):
    """Context with 1.19.0 loaded and selected."""
    context = SunburstContext(config)
    context.load_release(release)
    context.set_filters(Filters(version="1.19.0"))
    return context


@pytest.fixture
def release_json(tmp_path):
    """A release catalog file as the loader receives it."""
    data = {
        "release": "1.19.0",
        "spec": "https://example.invalid/swagger.json",
        "source": "audit-logs",
        "release_date": "2020-08-26",
        "endpoints": [
            {
                "endpoint": "readCoreV1Pod",
                "level": "stable",
                "category": "core",
                "path": "/api/v1/namespaces/{namespace}/pods/{name}",
                "description": "read the specified Pod",
                "tested": True,
                "conf_tested": True,
                "k8s_group": "",
                "k8s_version": "v1",
                "k8s_kind": "Pod",
                "operation_id": "ignored",
            },
            {
                "endpoint": "deleteCoreV1Pod",
                "level": "stable",
                "category": "core",
                "tested": False,
                "conf_tested": False,
            },
        ],
        "tests": [],
    }
    path = tmp_path / "1.19.0.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
