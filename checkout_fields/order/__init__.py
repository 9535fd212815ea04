IS_COMPANY_META_KEY = "billing_is_company"

# Permission required to edit company details on an order.
MANAGE_ORDERS_PERMISSION = "order.manage_orders"


class IsCompany:
    YES = "yes"
    NO = "no"

    CHOICES = [
        (YES, "Company order"),
        (NO, "Private order"),
    ]
