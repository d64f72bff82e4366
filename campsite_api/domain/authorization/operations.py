"""
Operations
----------

Every operation the service exposes, grouped by what the policies need to
know about them.
"""
from enum import Enum


class Operation(str, Enum):
    LIST_CAMPSITES = "list_campsites"
    GET_CAMPSITE = "get_campsite"
    CREATE_CAMPSITE = "create_campsite"
    REPLACE_CAMPSITE = "replace_campsite"
    DELETE_CAMPSITE = "delete_campsite"
    DELETE_ALL_CAMPSITES = "delete_all_campsites"
    LIST_COMMENTS = "list_comments"
    GET_COMMENT = "get_comment"
    ADD_COMMENT = "add_comment"
    CLEAR_COMMENTS = "clear_comments"
    UPDATE_COMMENT = "update_comment"
    DELETE_COMMENT = "delete_comment"

    @property
    def is_read(self) -> bool:
        return self in READ_OPERATIONS


READ_OPERATIONS = frozenset({
    Operation.LIST_CAMPSITES,
    Operation.GET_CAMPSITE,
    Operation.LIST_COMMENTS,
    Operation.GET_COMMENT,
})

ADMIN_CAMPSITE_OPERATIONS = frozenset({
    Operation.CREATE_CAMPSITE,
    Operation.REPLACE_CAMPSITE,
    Operation.DELETE_CAMPSITE,
    Operation.DELETE_ALL_CAMPSITES,
})

# Operations on a single comment that only its author may perform
OWNER_COMMENT_OPERATIONS = frozenset({
    Operation.UPDATE_COMMENT,
    Operation.DELETE_COMMENT,
})

# Operations that need an existing campsite. Deleting one campsite is not
# listed: a missing id is a harmless no-op there.
CAMPSITE_TARGET_OPERATIONS = frozenset({
    Operation.GET_CAMPSITE,
    Operation.REPLACE_CAMPSITE,
    Operation.LIST_COMMENTS,
    Operation.GET_COMMENT,
    Operation.ADD_COMMENT,
    Operation.CLEAR_COMMENTS,
    Operation.UPDATE_COMMENT,
    Operation.DELETE_COMMENT,
})

COMMENT_TARGET_OPERATIONS = frozenset({
    Operation.GET_COMMENT,
    Operation.UPDATE_COMMENT,
    Operation.DELETE_COMMENT,
})
