"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    USERNAME = "username"
    FIRST_NAME = "firstname"
    LAST_NAME = "lastname"
    ADMIN = "admin"

    # MongoDB specific
    MONGO_ID = "_id"
