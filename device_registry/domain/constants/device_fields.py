"""Constants for Device model field names"""


class DeviceFields:
    """Field name constants for Device model"""
    ID = "id"
    NAME = "name"
    BRAND = "brand"
    STATE = "state"
    CREATED_AT = "created_at"

    # MongoDB specific
    MONGO_ID = "_id"  # Device UUID is stored as the document _id
