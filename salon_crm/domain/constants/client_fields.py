"""Constants for Client model field names"""


class ClientFields:
    """Field name constants for Client documents"""
    ID = "id"
    COMPANY_NAME = "company_name"
    COMPANY_NAME_NORMALIZED = "company_name_normalized"
    BUSINESS_TYPE = "business_type"
    REGISTRATION_NUMBER = "registration_number"
    TAX_ID = "tax_id"
    WEBSITE = "website"
    PRIMARY_CONTACT = "primary_contact"
    SECONDARY_CONTACTS = "secondary_contacts"
    CONTACT_EMAILS = "contact_emails"
    BILLING_ADDRESS = "billing_address"
    SHIPPING_ADDRESS = "shipping_address"
    CREDIT_TERMS = "credit_terms"
    CONTRACT_START_DATE = "contract_start_date"
    CONTRACT_END_DATE = "contract_end_date"
    NOTES = "notes"
    METADATA = "metadata"
    IS_ACTIVE = "is_active"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"

    # Embedded contact person
    CONTACT_NAME = "name"
    CONTACT_POSITION = "position"
    CONTACT_EMAIL = "email"
    CONTACT_PHONE = "phone"
    CONTACT_IS_PRIMARY = "is_primary"

    # Embedded credit terms
    PAYMENT_TERMS = "payment_terms"
    CREDIT_LIMIT = "credit_limit"
    CURRENT_BALANCE = "current_balance"
    DISCOUNT_PERCENT = "discount_percent"
    CUSTOM_TERMS_DAYS = "custom_terms_days"
    TERMS_ACTIVE = "is_active"

    # MongoDB specific
    MONGO_ID = "_id"
