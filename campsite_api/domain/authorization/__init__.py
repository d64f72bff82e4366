"""
Authorization package
---------------------

Pure allow/deny decisions for every campsite and comment operation.

Auto-registration:
- Policies register themselves in the registry when this package is imported.
"""
from campsite_api.domain.authorization import policies  # noqa: F401
from campsite_api.domain.authorization.decision import AuthorizationContext, Decision
from campsite_api.domain.authorization.engine import decide
from campsite_api.domain.authorization.operations import Operation

__all__ = ["AuthorizationContext", "Decision", "Operation", "decide"]
