"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    PASSWORD = "password"
    PHONE = "phone"
    
    # Business fields that may be written by create/update
    WRITABLE = (NAME, EMAIL, PASSWORD, PHONE)
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
