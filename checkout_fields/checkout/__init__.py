# Name of the hidden input carrying the client's list of hidden fields.
DISABLED_FIELDS_INPUT = "awcf_disabled_fields"

REQUIRED_CLASS = "validate-required"
HIDDEN_CLASS = "awcf-hidden"
VISIBLE_CLASS = "awcf-visible"
COMPANY_FIELD_CLASS = "awcf-company-field"
COMPANY_CHECKBOX_CLASS = "awcf-company-checkbox"


class Fieldset:
    BILLING = "billing"
    SHIPPING = "shipping"

    CHOICES = [
        (BILLING, "Billing"),
        (SHIPPING, "Shipping"),
    ]

    # Only keys carrying the fieldset prefix are managed by the field configs.
    PREFIXES = {BILLING: "billing_", SHIPPING: "shipping_"}


class FieldKind:
    TEXT = "text"
    TEXTAREA = "textarea"
    CHECKBOX = "checkbox"
    EMAIL = "email"
    TEL = "tel"
    SELECT = "select"
    COUNTRY = "country"
    STATE = "state"
