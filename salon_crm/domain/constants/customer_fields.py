"""Constants for Customer model field names"""


class CustomerFields:
    """Field name constants for Customer documents"""
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"
    PHONE_CLEAN = "phone_clean"
    WHATSAPP_ID = "whatsapp_id"
    AVATAR = "avatar"
    LOYALTY_POINTS = "loyalty_points"
    LOYALTY_TIER = "loyalty_tier"
    TOTAL_VISITS = "total_visits"
    LAST_VISIT = "last_visit"
    PREFERENCES = "preferences"
    METADATA = "metadata"
    IS_ACTIVE = "is_active"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"
