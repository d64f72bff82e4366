"""Constants for Campsite model field names"""


class CampsiteFields:
    """Field name constants for Campsite model"""
    ID = "id"
    NAME = "name"
    DESCRIPTION = "description"
    COMMENTS = "comments"
    VERSION = "version"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # Keys written by the Mongoose-era service
    LEGACY_CREATED_AT = "createdAt"
    LEGACY_UPDATED_AT = "updatedAt"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field (holds the campsite id)

    # Keys mapped onto the entity itself rather than its field bag
    STORED = frozenset({ID, MONGO_ID, COMMENTS, VERSION, CREATED_AT, UPDATED_AT})

    # Keys a client field bag may never set
    RESERVED = STORED | {LEGACY_CREATED_AT, LEGACY_UPDATED_AT}
