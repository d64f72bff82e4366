"""
Modify Comment Use Cases
========================

Author-only edit and delete of a single comment.

Both follow the same sequence: fetch the campsite, locate the comment,
check ownership, mutate, save the whole campsite. A failed ownership check
is returned as a denied outcome (nothing is saved); missing campsite or
comment raise NotFoundError.
"""
import logging
from typing import Optional, Tuple

from campsite_api.application.use_cases.authorize import raise_for_denial
from campsite_api.application.views import CommentMutationOutcome
from campsite_api.domain.authorization import AuthorizationContext, Decision, Operation, decide
from campsite_api.domain.exceptions import ErrorKind
from campsite_api.domain.models.campsite import Campsite
from campsite_api.domain.models.principal import Principal
from campsite_api.domain.repositories.campsite_repository import CampsiteRepository

logger = logging.getLogger(__name__)


def _ownership_denied(decision: Decision) -> bool:
    return not decision.allowed and decision.reason is ErrorKind.FORBIDDEN


class _OwnedCommentUseCase:
    """Shared fetch/locate/gate for owner-only comment operations."""

    operation: Operation

    def __init__(self, campsite_repository: CampsiteRepository):
        self._repository = campsite_repository

    def _load(
        self, campsite_id: str, comment_id: str, principal: Optional[Principal]
    ) -> Tuple[Optional[Campsite], Optional[str]]:
        """Returns (campsite, None) when allowed, (None, message) on soft deny."""
        campsite = self._repository.find_by_id(campsite_id)
        decision = decide(
            self.operation,
            AuthorizationContext(
                principal=principal,
                campsite_id=campsite_id,
                campsite=campsite,
                comment_id=comment_id,
            ),
        )
        if _ownership_denied(decision):
            logger.info(
                f"{self.operation.value} on comment {comment_id} denied for "
                f"{principal.user_id}: not the author"
            )
            return None, decision.message
        raise_for_denial(decision)
        return campsite, None


class UpdateCommentUseCase(_OwnedCommentUseCase):
    """Use case for editing a comment's text."""

    operation = Operation.UPDATE_COMMENT

    def execute(
        self,
        campsite_id: str,
        comment_id: str,
        text: Optional[str],
        principal: Optional[Principal],
    ) -> CommentMutationOutcome:
        campsite, denied_message = self._load(campsite_id, comment_id, principal)
        if denied_message:
            return CommentMutationOutcome.deny(denied_message)

        # Empty or missing text leaves the comment as is; the campsite is still saved
        campsite.find_comment(comment_id).update_text(text)
        saved: Campsite = self._repository.save(campsite)
        logger.info(f"Comment {comment_id} on campsite {campsite_id} updated by {principal.user_id}")
        return CommentMutationOutcome.saved(saved)


class DeleteCommentUseCase(_OwnedCommentUseCase):
    """Use case for removing a comment."""

    operation = Operation.DELETE_COMMENT

    def execute(
        self,
        campsite_id: str,
        comment_id: str,
        principal: Optional[Principal],
    ) -> CommentMutationOutcome:
        campsite, denied_message = self._load(campsite_id, comment_id, principal)
        if denied_message:
            return CommentMutationOutcome.deny(denied_message)

        campsite.remove_comment(comment_id)
        saved: Campsite = self._repository.save(campsite)
        logger.info(f"Comment {comment_id} on campsite {campsite_id} deleted by {principal.user_id}")
        return CommentMutationOutcome.saved(saved)
