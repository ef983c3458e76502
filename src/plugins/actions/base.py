"""
Action Base - Abstract interface for provisioning actions.

Every action runs in three stages per invocation:

1. read_param() deserializes the raw payload into a typed batch
2. check_param() validates business rules over every item in the batch
3. do() provisions each item in order and collects typed results

BatchAction implements all three stages once. Resource plugins supply a
batch schema, a resource type and an ActionPolicy describing the per-item
rules and the single-resource provisioning call.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple, Type

from plugins.base import (
    ProviderParams,
    ProvisionResult,
    RawPayload,
    ResourceSpecBatch,
    ResultBatch,
    load_payload,
    logger,
    resolve_provider_params,
)
from plugins.errors import (
    MalformedInputError,
    ParamValidationError,
    ProvisioningError,
    TypeMismatchError,
)
from validation import validate_payload_against_schema, validate_schema


class Action(ABC):
    """
    Abstract base class for actions.

    Only do() has external side effects; read_param() and check_param()
    are pure.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Action name used for lookup (e.g., 'create')."""
        pass

    @abstractmethod
    def read_param(self, raw: RawPayload) -> ResourceSpecBatch:
        """
        Deserialize a raw payload into a typed batch.

        Args:
            raw: JSON text or an already decoded mapping

        Returns:
            The typed batch

        Raises:
            MalformedInputError: If the payload does not match the expected shape
        """
        pass

    @abstractmethod
    def check_param(self, batch: Any) -> None:
        """
        Validate business rules for every item in the batch.

        Args:
            batch: The batch returned by read_param()

        Raises:
            TypeMismatchError: If batch was not produced by this action's read_param()
            ParamValidationError: For the first item violating a rule
        """
        pass

    @abstractmethod
    def do(self, batch: ResourceSpecBatch) -> ResultBatch:
        """
        Provision every item in the batch.

        Args:
            batch: A batch that passed check_param()

        Returns:
            Results in the same order as batch.inputs

        Raises:
            ProvisioningError: On the first item that fails
        """
        pass


class ActionPolicy(ABC):
    """Per-action rules plugged into BatchAction."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def check(self, item: Any) -> Optional[Tuple[str, str]]:
        """Return (field, message) for the first violated rule, or None."""
        pass

    @abstractmethod
    def execute(self, service: Any, params: ProviderParams, item: Any) -> ProvisionResult:
        """Provision one resource and return its result."""
        pass

    def resource_id(self, item: Any) -> str:
        """Identifier used to name the resource in error messages."""
        return getattr(item, "guid", "")


class BatchAction(Action):
    """
    Action that runs one policy over a batch of resource specs.

    Items are processed strictly in order. The first failure aborts the
    batch and no partial result is returned; resources already provisioned
    earlier in the batch are left for the caller to reconcile.
    """

    def __init__(
        self,
        policy: ActionPolicy,
        service: Any,
        resource_type: Type,
        input_schema: Dict[str, Any],
    ):
        is_valid, error = validate_schema(input_schema)
        if not is_valid:
            raise ValueError(f"{policy.name}: {error}")

        self.policy = policy
        self.service = service
        self.resource_type = resource_type
        self.input_schema = input_schema

    @property
    def name(self) -> str:
        return self.policy.name

    def read_param(self, raw: RawPayload) -> ResourceSpecBatch:
        payload = load_payload(raw)

        is_valid, error = validate_payload_against_schema(payload, self.input_schema)
        if not is_valid:
            raise MalformedInputError(f"{self.name}: invalid payload: {error}")

        inputs = [
            self.resource_type.from_dict(item) for item in payload.get("inputs") or []
        ]
        return ResourceSpecBatch(inputs=inputs)

    def check_param(self, batch: Any) -> None:
        if not isinstance(batch, ResourceSpecBatch) or not all(
            isinstance(item, self.resource_type) for item in batch.inputs
        ):
            raise TypeMismatchError(
                f"{self.name}: input type={type(batch).__name__} not right"
            )

        for index, item in enumerate(batch.inputs):
            violation = self.policy.check(item)
            if violation is not None:
                field_name, message = violation
                raise ParamValidationError(
                    f"{self.name}: input[{index}] (guid={item.guid!r}) {message}",
                    index=index,
                    guid=item.guid,
                    field=field_name,
                )

    def resolve_params(self, batch: ResourceSpecBatch) -> List[ProviderParams]:
        """
        Resolve the provider parameter bundle of every item.

        Raises:
            MalformedInputError: For the first item with an unusable bundle
        """
        resolved = []
        for index, item in enumerate(batch.inputs):
            try:
                resolved.append(resolve_provider_params(item.provider_params))
            except MalformedInputError as e:
                raise MalformedInputError(
                    f"{self.name}: input[{index}] (guid={item.guid!r}) {e}",
                    index=index,
                    guid=item.guid,
                ) from e
        return resolved

    def do(self, batch: ResourceSpecBatch) -> ResultBatch:
        outputs = ResultBatch()
        # every bundle is resolved before the first provisioning call
        all_params = self.resolve_params(batch)

        for index, (item, params) in enumerate(zip(batch.inputs, all_params)):
            resource_id = self.policy.resource_id(item)
            try:
                result = self.policy.execute(self.service, params, item)
            except Exception as e:
                logger.error(
                    f"{self.name} failed for {resource_id} "
                    f"(input {index + 1}/{len(batch)}): {e}"
                )
                raise ProvisioningError(
                    f"{self.name} failed for {resource_id}: {e}",
                    resource_id=resource_id,
                    index=index,
                ) from e
            outputs.outputs.append(result)

        logger.info(
            f"{self.name} finished for {len(outputs)} resource(s): "
            f"{[item.guid for item in batch.inputs]}"
        )
        return outputs


def run_action(action: Action, raw: RawPayload) -> ResultBatch:
    """Run read_param, check_param and do in sequence."""
    batch = action.read_param(raw)
    action.check_param(batch)
    return action.do(batch)
