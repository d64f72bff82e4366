"""
Authorization engine
--------------------

Engine is policy-agnostic. It walks the policies registered in
policy_registry (lowest priority first); the first policy that returns a
Decision wins. When no policy objects the operation is allowed.
"""
import logging

from campsite_api.domain.authorization.decision import AuthorizationContext, Decision
from campsite_api.domain.authorization.operations import Operation
from campsite_api.domain.authorization.registry import policy_registry

logger = logging.getLogger(__name__)


def decide(operation: Operation, context: AuthorizationContext) -> Decision:
    """
    Decide whether ``operation`` may run in ``context``. Pure: no side effects
    beyond debug logging.
    """
    for _priority, policy_name, policy in policy_registry:
        decision = policy(operation, context)
        if decision is not None:
            if not decision.allowed:
                logger.debug(f"{operation.value} denied by {policy_name}: {decision.reason.value}")
            return decision
    return Decision.allow()
