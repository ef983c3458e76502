"""
Redis provisioning service.

RedisProvisioningService is the interface actions call to create and clear
instances. TencentCloudRedisService implements it with the Tencent Cloud
Python SDK (Redis API version 2018-04-12). SDK failures surface as
TencentCloudSDKException.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from tencentcloud.common import credential as tc_credential
from tencentcloud.common.profile.client_profile import ClientProfile
from tencentcloud.common.profile.http_profile import HttpProfile
from tencentcloud.redis.v20180412 import models, redis_client

from plugins.base import Credential

logger = logging.getLogger(__name__)


class RedisProvisioningService(ABC):
    """Cloud-side operations used by the Redis actions."""

    @abstractmethod
    def create_instances(
        self,
        region: str,
        credential: Credential,
        zone_id: int,
        type_id: int,
        mem_size: int,
        goods_num: int,
        period: int,
        password: str,
        billing_mode: int,
        vpc_id: Optional[str] = None,
        subnet_id: Optional[str] = None,
    ) -> Tuple[str, str]:
        """
        Buy Redis instances.

        Returns:
            Tuple of (request_id, deal_id)
        """
        pass

    @abstractmethod
    def clear_instance(
        self, region: str, credential: Credential, instance_id: str, password: str
    ) -> Tuple[str, int]:
        """
        Clear (terminate) a Redis instance.

        Returns:
            Tuple of (request_id, task_id)
        """
        pass


class TencentCloudRedisService(RedisProvisioningService):
    """RedisProvisioningService backed by the Tencent Cloud SDK."""

    def __init__(self, endpoint: str = "redis.tencentcloudapi.com", timeout: int = 60):
        self.endpoint = endpoint
        self.timeout = timeout

    def get_client(self, region: str, credential: Credential) -> redis_client.RedisClient:
        """Build a Redis API client for one region and key pair."""
        cred = tc_credential.Credential(credential.secret_id, credential.secret_key)
        http_profile = HttpProfile(endpoint=self.endpoint, reqTimeout=self.timeout)
        client_profile = ClientProfile(httpProfile=http_profile)
        return redis_client.RedisClient(cred, region, client_profile)

    def create_instances(
        self,
        region: str,
        credential: Credential,
        zone_id: int,
        type_id: int,
        mem_size: int,
        goods_num: int,
        period: int,
        password: str,
        billing_mode: int,
        vpc_id: Optional[str] = None,
        subnet_id: Optional[str] = None,
    ) -> Tuple[str, str]:
        request = models.CreateInstancesRequest()
        request.ZoneId = zone_id
        request.TypeId = type_id
        request.MemSize = mem_size
        request.GoodsNum = goods_num
        request.Period = period
        request.Password = password
        request.BillingMode = billing_mode
        if vpc_id:
            request.VpcId = vpc_id
        if subnet_id:
            request.SubnetId = subnet_id

        logger.debug(f"Calling CreateInstances in region {region} via {self.endpoint}")
        response = self.get_client(region, credential).CreateInstances(request)
        return response.RequestId, response.DealId

    def clear_instance(
        self, region: str, credential: Credential, instance_id: str, password: str
    ) -> Tuple[str, int]:
        request = models.ClearInstanceRequest()
        request.InstanceId = instance_id
        request.Password = password

        logger.debug(f"Calling ClearInstance({instance_id}) in region {region}")
        response = self.get_client(region, credential).ClearInstance(request)
        return response.RequestId, response.TaskId
