"""
Policy registry
---------------

Provides a simple registry + decorator for authorization policies.
Each policy returns a Decision when it applies, or None to pass.
Policies are evaluated by ascending priority.
"""
from typing import TYPE_CHECKING, Callable, List, Optional, Tuple

if TYPE_CHECKING:
    from campsite_api.domain.authorization.decision import AuthorizationContext, Decision
    from campsite_api.domain.authorization.operations import Operation

PolicyHandler = Callable[["Operation", "AuthorizationContext"], Optional["Decision"]]

policy_registry: List[Tuple[int, str, PolicyHandler]] = []


def register_policy(priority: int) -> Callable[[PolicyHandler], PolicyHandler]:
    """
    Decorator to register a policy handler at a given priority.
    """
    def decorator(handler_function: PolicyHandler) -> PolicyHandler:
        policy_registry.append((priority, handler_function.__name__, handler_function))
        policy_registry.sort(key=lambda entry: entry[0])
        return handler_function
    return decorator
