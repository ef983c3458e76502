"""Pytest configuration and fixtures."""

import pytest

from config import reset_config
from plugins.redis.service import RedisProvisioningService
from plugins.registry import reset_registry

PROVIDER_PARAMS = "Region=ap-guangzhou;SecretID=AKIDtest;SecretKey=topsecret"


class StubRedisService(RedisProvisioningService):
    """In-memory provisioning service that records every call."""

    def __init__(self, fail_on_call=None, error=None):
        self.calls = []
        self.fail_on_call = fail_on_call
        self.error = error or RuntimeError("cloud unavailable")

    def _record(self, name, **kwargs):
        self.calls.append((name, kwargs))
        if self.fail_on_call is not None and len(self.calls) == self.fail_on_call:
            raise self.error
        return len(self.calls)

    def create_instances(
        self,
        region,
        credential,
        zone_id,
        type_id,
        mem_size,
        goods_num,
        period,
        password,
        billing_mode,
        vpc_id=None,
        subnet_id=None,
    ):
        n = self._record(
            "create_instances",
            region=region,
            credential=credential,
            zone_id=zone_id,
            type_id=type_id,
            mem_size=mem_size,
            goods_num=goods_num,
            period=period,
            password=password,
            billing_mode=billing_mode,
            vpc_id=vpc_id,
            subnet_id=subnet_id,
        )
        return f"req-{n}", f"deal-{n}"

    def clear_instance(self, region, credential, instance_id, password):
        n = self._record(
            "clear_instance",
            region=region,
            credential=credential,
            instance_id=instance_id,
            password=password,
        )
        return f"req-{n}", 1000 + n


@pytest.fixture(autouse=True)
def clean_globals():
    """Reset the registry and config singletons around each test."""
    reset_registry()
    reset_config()
    yield
    reset_registry()
    reset_config()


@pytest.fixture
def stub_service():
    return StubRedisService()


@pytest.fixture
def provider_params():
    return PROVIDER_PARAMS


@pytest.fixture
def create_item():
    """A valid create input item."""
    return {
        "guid": "g1",
        "provider_params": PROVIDER_PARAMS,
        "zone_id": 100003,
        "type_id": 2,
        "mem_size": 1024,
        "goods_num": 1,
        "period": 1,
        "password": "p@ssw0rd",
        "billing_mode": 0,
        "vpc_id": "vpc-abc",
        "subnet_id": "subnet-xyz",
    }


@pytest.fixture
def terminate_item():
    """A valid terminate input item."""
    return {
        "guid": "g1",
        "provider_params": PROVIDER_PARAMS,
        "instance_id": "crs-1234",
        "password": "p@ssw0rd",
    }
