class FieldStatus:
    ENABLED = "enabled"
    DISABLED = "disabled"

    CHOICES = [
        (ENABLED, "Enabled"),
        (DISABLED, "Disabled"),
    ]


class AddressFormMode:
    """Whether a field appears on the account address-edit form."""

    NOTHING = "nothing"  # Leave the host default untouched
    ENABLE = "enable"
    DISABLE = "disable"

    CHOICES = [
        (NOTHING, "Keep default"),
        (ENABLE, "Show on address form"),
        (DISABLE, "Hide on address form"),
    ]


class CheckoutOrder:
    BILLING_FIRST = "billing_first"
    SHIPPING_FIRST = "shipping_first"

    CHOICES = [
        (BILLING_FIRST, "Billing details first"),
        (SHIPPING_FIRST, "Shipping details first"),
    ]
