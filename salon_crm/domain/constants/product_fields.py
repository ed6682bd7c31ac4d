"""Constants for Product model field names"""


class ProductFields:
    """Field name constants for Product documents"""
    ID = "id"
    NAME = "name"
    NAME_NORMALIZED = "name_normalized"
    DESCRIPTION = "description"
    PRICE = "price"
    CATEGORY = "category"
    TYPE = "type"
    SKU = "sku"
    SKU_PREFIX = "sku_prefix"
    SKU_SEQUENCE = "sku_sequence"
    IS_ACTIVE = "is_active"
    DURATION_MINUTES = "duration_minutes"
    STOCK_LEVEL = "stock_level"
    LOW_STOCK_THRESHOLD = "low_stock_threshold"
    IS_LOW_STOCK = "is_low_stock"
    IS_OUT_OF_STOCK = "is_out_of_stock"
    METADATA = "metadata"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # MongoDB specific
    MONGO_ID = "_id"
