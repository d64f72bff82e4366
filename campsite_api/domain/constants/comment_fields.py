"""Constants for Comment model field names"""


class CommentFields:
    """Field name constants for embedded Comment documents"""
    ID = "id"
    MONGO_ID = "_id"  # embedded documents keep their id in _id
    AUTHOR_ID = "author"
    TEXT = "text"
    RATING = "rating"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # Keys written by the Mongoose-era service
    LEGACY_CREATED_AT = "createdAt"
    LEGACY_UPDATED_AT = "updatedAt"
