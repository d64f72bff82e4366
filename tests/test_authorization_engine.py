import pytest

from campsite_api.domain.authorization import AuthorizationContext, Operation, decide
from campsite_api.domain.authorization.registry import policy_registry
from campsite_api.domain.exceptions import ErrorKind
from campsite_api.domain.models.campsite import Campsite
from campsite_api.domain.models.principal import Principal

ADMIN = Principal(user_id="admin-1", is_admin=True)
USER = Principal(user_id="user-1")
OTHER = Principal(user_id="user-2")


@pytest.fixture()
def site():
    campsite = Campsite(id="c1", fields={"name": "Chrome River"})
    campsite.add_comment(author_id="user-1", text="nice")
    return campsite


@pytest.mark.parametrize("operation", [
    Operation.LIST_CAMPSITES,
    Operation.GET_CAMPSITE,
    Operation.LIST_COMMENTS,
    Operation.GET_COMMENT,
])
def test_reads_allowed_without_principal(operation):
    assert decide(operation, AuthorizationContext()).allowed


@pytest.mark.parametrize("operation", [
    Operation.CREATE_CAMPSITE,
    Operation.REPLACE_CAMPSITE,
    Operation.DELETE_CAMPSITE,
    Operation.DELETE_ALL_CAMPSITES,
    Operation.ADD_COMMENT,
    Operation.CLEAR_COMMENTS,
    Operation.UPDATE_COMMENT,
    Operation.DELETE_COMMENT,
])
def test_writes_need_principal(operation):
    decision = decide(operation, AuthorizationContext())
    assert not decision.allowed
    assert decision.reason is ErrorKind.UNAUTHENTICATED


@pytest.mark.parametrize("operation", [
    Operation.CREATE_CAMPSITE,
    Operation.REPLACE_CAMPSITE,
    Operation.DELETE_CAMPSITE,
    Operation.DELETE_ALL_CAMPSITES,
    Operation.CLEAR_COMMENTS,
])
def test_admin_only_operations(operation, site):
    context = AuthorizationContext(principal=USER, campsite_id=site.id, campsite=site)
    decision = decide(operation, context)
    assert decision.reason is ErrorKind.FORBIDDEN
    assert decision.message == "You are not authorized to perform this operation!"

    admin_context = AuthorizationContext(principal=ADMIN, campsite_id=site.id, campsite=site)
    assert decide(operation, admin_context).allowed


def test_admin_check_precedes_existence():
    context = AuthorizationContext(principal=USER, campsite_id="missing")
    assert decide(Operation.CLEAR_COMMENTS, context).reason is ErrorKind.FORBIDDEN


def test_missing_campsite_is_not_found():
    context = AuthorizationContext(principal=USER, campsite_id="missing")
    decision = decide(Operation.ADD_COMMENT, context)
    assert decision.reason is ErrorKind.NOT_FOUND
    assert decision.message == "Campsite missing not found"


def test_delete_campsite_does_not_require_existence():
    context = AuthorizationContext(principal=ADMIN, campsite_id="missing")
    assert decide(Operation.DELETE_CAMPSITE, context).allowed


def test_missing_comment_is_not_found(site):
    context = AuthorizationContext(principal=USER, campsite_id=site.id, campsite=site, comment_id="nope")
    decision = decide(Operation.UPDATE_COMMENT, context)
    assert decision.reason is ErrorKind.NOT_FOUND
    assert decision.message == "Comment nope not found"


def test_author_may_edit_and_delete(site):
    comment_id = site.comments[0].id
    context = AuthorizationContext(principal=USER, campsite_id=site.id, campsite=site, comment_id=comment_id)
    assert decide(Operation.UPDATE_COMMENT, context).allowed
    assert decide(Operation.DELETE_COMMENT, context).allowed


@pytest.mark.parametrize("principal", [OTHER, ADMIN])
def test_non_author_denied_even_if_admin(site, principal):
    comment_id = site.comments[0].id
    context = AuthorizationContext(principal=principal, campsite_id=site.id, campsite=site, comment_id=comment_id)

    update = decide(Operation.UPDATE_COMMENT, context)
    assert update.reason is ErrorKind.FORBIDDEN
    assert update.message == "Forbidden: You can only edit your own comments"

    delete = decide(Operation.DELETE_COMMENT, context)
    assert delete.message == "Forbidden: You can only delete your own comments"


def test_any_user_may_add_comment(site):
    context = AuthorizationContext(principal=OTHER, campsite_id=site.id, campsite=site)
    assert decide(Operation.ADD_COMMENT, context).allowed


def test_policies_run_in_priority_order():
    assert [name for _priority, name, _handler in policy_registry] == [
        "reads_are_public",
        "principal_required",
        "admin_only_campsite_writes",
        "admin_only_comment_clear",
        "target_must_exist",
        "comment_owner_only",
    ]
    priorities = [priority for priority, _name, _handler in policy_registry]
    assert priorities == sorted(priorities)

    first = policy_registry[0][2]
    assert first(Operation.LIST_CAMPSITES, AuthorizationContext()).allowed
    assert first(Operation.ADD_COMMENT, AuthorizationContext(principal=USER)) is None
