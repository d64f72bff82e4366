"""
Authorization policies
----------------------

Priority order:
  10  reads are public
  20  everything else needs a principal
  30  campsite writes are admin-only
  40  clearing all comments is admin-only
  50  the targeted campsite/comment must exist
  60  single-comment edits and deletes are author-only (no admin override)
"""
from typing import Optional

from campsite_api.domain.authorization.decision import AuthorizationContext, Decision
from campsite_api.domain.authorization.operations import (
    ADMIN_CAMPSITE_OPERATIONS,
    CAMPSITE_TARGET_OPERATIONS,
    COMMENT_TARGET_OPERATIONS,
    OWNER_COMMENT_OPERATIONS,
    Operation,
)
from campsite_api.domain.authorization.registry import register_policy
from campsite_api.domain.exceptions import ErrorKind

NOT_AUTHORIZED_MESSAGE = "You are not authorized to perform this operation!"

OWNER_ONLY_MESSAGES = {
    Operation.UPDATE_COMMENT: "Forbidden: You can only edit your own comments",
    Operation.DELETE_COMMENT: "Forbidden: You can only delete your own comments",
}


@register_policy(10)
def reads_are_public(operation: Operation, context: AuthorizationContext) -> Optional[Decision]:
    if operation.is_read:
        return Decision.allow()
    return None


@register_policy(20)
def principal_required(operation: Operation, context: AuthorizationContext) -> Optional[Decision]:
    if context.principal is None:
        return Decision.deny(ErrorKind.UNAUTHENTICATED, "Authentication required")
    return None


@register_policy(30)
def admin_only_campsite_writes(operation: Operation, context: AuthorizationContext) -> Optional[Decision]:
    if operation in ADMIN_CAMPSITE_OPERATIONS and not context.principal.is_admin:
        return Decision.deny(ErrorKind.FORBIDDEN, NOT_AUTHORIZED_MESSAGE)
    return None


@register_policy(40)
def admin_only_comment_clear(operation: Operation, context: AuthorizationContext) -> Optional[Decision]:
    if operation is Operation.CLEAR_COMMENTS and not context.principal.is_admin:
        return Decision.deny(ErrorKind.FORBIDDEN, NOT_AUTHORIZED_MESSAGE)
    return None


@register_policy(50)
def target_must_exist(operation: Operation, context: AuthorizationContext) -> Optional[Decision]:
    if operation not in CAMPSITE_TARGET_OPERATIONS:
        return None
    if context.campsite is None:
        return Decision.deny(ErrorKind.NOT_FOUND, f"Campsite {context.campsite_id} not found")
    if operation in COMMENT_TARGET_OPERATIONS and context.campsite.find_comment(context.comment_id) is None:
        return Decision.deny(ErrorKind.NOT_FOUND, f"Comment {context.comment_id} not found")
    return None


@register_policy(60)
def comment_owner_only(operation: Operation, context: AuthorizationContext) -> Optional[Decision]:
    if operation not in OWNER_COMMENT_OPERATIONS:
        return None
    comment = context.campsite.find_comment(context.comment_id)
    if not comment.is_authored_by(context.principal.user_id):
        return Decision.deny(ErrorKind.FORBIDDEN, OWNER_ONLY_MESSAGES[operation])
    return None
