"""Constants for MenuItem model field names"""


class MenuItemFields:
    """Field name constants for MenuItem documents"""
    ID = "id"
    NAME = "name"
    NAME_NORMALIZED = "name_normalized"
    DESCRIPTION = "description"
    CATEGORY = "category"
    DURATION = "duration"
    PRICE = "price"
    IS_PACKAGE = "is_package"
    INCLUDED_SERVICES = "included_services"
    REQUIREMENTS = "requirements"
    BENEFITS = "benefits"
    ADVANCE_BOOKING_REQUIRED = "advance_booking_required"
    ADVANCE_BOOKING_DAYS = "advance_booking_days"
    AVAILABLE_ONLINE = "available_online"
    DISPLAY_ORDER = "display_order"
    IMAGE_URL = "image_url"
    TAGS = "tags"
    SEASONAL_ITEM = "seasonal_item"
    VALID_FROM = "valid_from"
    VALID_TO = "valid_to"
    MAX_BOOKINGS_PER_DAY = "max_bookings_per_day"
    METADATA = "metadata"
    IS_ACTIVE = "is_active"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"
