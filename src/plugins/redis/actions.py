"""
Redis Plugin - create and terminate actions for managed Redis instances.

Both actions share BatchAction; they differ only in the policy that checks
each input and calls the provisioning service.
"""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from config import get_config
from plugins.actions.base import Action, ActionPolicy, BatchAction
from plugins.base import BillingMode, ProviderParams, ProvisionResult, logger
from plugins.errors import ActionNotFoundError
from plugins.redis.models import REDIS_INPUT_SCHEMA, RedisInput
from plugins.redis.service import RedisProvisioningService, TencentCloudRedisService

BILLING_MODES = {mode.value for mode in BillingMode}


class CreateInstancePolicy(ActionPolicy):
    """Buy one batch item's worth of Redis instances."""

    @property
    def name(self) -> str:
        return "create"

    def check(self, item: RedisInput) -> Optional[Tuple[str, str]]:
        if item.goods_num < 1:
            return "goods_num", f"goods_num is invalid: {item.goods_num}"
        if item.password == "":
            return "password", "password is empty"
        if item.billing_mode not in BILLING_MODES:
            return "billing_mode", f"billing_mode is invalid: {item.billing_mode}"
        return None

    def execute(
        self,
        service: RedisProvisioningService,
        params: ProviderParams,
        item: RedisInput,
    ) -> ProvisionResult:
        request_id, deal_id = service.create_instances(
            params.region,
            params.credential,
            zone_id=item.zone_id,
            type_id=item.type_id,
            mem_size=item.mem_size,
            goods_num=item.goods_num,
            period=item.period,
            password=item.password,
            billing_mode=item.billing_mode,
            vpc_id=item.vpc_id or None,
            subnet_id=item.subnet_id or None,
        )
        logger.info(f"Created redis for guid={item.guid}: deal_id={deal_id}")
        return ProvisionResult(request_id=request_id, guid=item.guid, deal_id=deal_id)


class ClearInstancePolicy(ActionPolicy):
    """Clear one existing Redis instance."""

    @property
    def name(self) -> str:
        return "terminate"

    def check(self, item: RedisInput) -> Optional[Tuple[str, str]]:
        if item.instance_id == "":
            return "instance_id", "instance_id is empty"
        if item.password == "":
            return "password", "password is empty"
        return None

    def execute(
        self,
        service: RedisProvisioningService,
        params: ProviderParams,
        item: RedisInput,
    ) -> ProvisionResult:
        request_id, task_id = service.clear_instance(
            params.region,
            params.credential,
            instance_id=item.instance_id,
            password=item.password,
        )
        logger.info(f"Cleared redis instance {item.instance_id}: task_id={task_id}")
        return ProvisionResult(request_id=request_id, guid=item.guid, task_id=task_id)

    def resource_id(self, item: RedisInput) -> str:
        return f"InstanceId={item.instance_id}"


class RedisPlugin:
    """
    Facade over the Redis actions.

    The action set is fixed when the plugin is constructed and cannot be
    changed afterwards.
    """

    name = "redis"
    version = "1.0.0"

    def __init__(self, service: Optional[RedisProvisioningService] = None):
        if service is None:
            service = self.default_service()
        self.service = service

        actions: Dict[str, Action] = {}
        for policy in (CreateInstancePolicy(), ClearInstancePolicy()):
            actions[policy.name] = BatchAction(
                policy=policy,
                service=service,
                resource_type=RedisInput,
                input_schema=REDIS_INPUT_SCHEMA,
            )
        self._actions: Mapping[str, Action] = MappingProxyType(actions)

    @classmethod
    def load_config_from_env(cls) -> Dict[str, Any]:
        """Load Redis plugin configuration from environment variables."""
        provisioning = get_config().provisioning
        return {
            "endpoint": provisioning.endpoint,
            "timeout": provisioning.request_timeout,
        }

    @classmethod
    def default_service(cls) -> RedisProvisioningService:
        """Build the Tencent Cloud service from configuration."""
        config = cls.load_config_from_env()
        logger.debug(
            f"Redis plugin using endpoint={config['endpoint']}, "
            f"timeout={config['timeout']}s"
        )
        return TencentCloudRedisService(**config)

    @property
    def actions(self) -> Mapping[str, Action]:
        return self._actions

    def list_actions(self) -> List[str]:
        """List the names of all actions on this plugin."""
        return list(self._actions.keys())

    def get_action_by_name(self, action_name: str) -> Action:
        """
        Get an action by name.

        Raises:
            ActionNotFoundError: If the plugin has no such action
        """
        action = self._actions.get(action_name)
        if action is None:
            raise ActionNotFoundError(self.name, action_name, self.list_actions())
        return action
