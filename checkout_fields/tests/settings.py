SECRET_KEY = "checkout-fields-tests"

INSTALLED_APPS = [
    "checkout_fields",
]

DATABASES = {}

USE_TZ = True

CHECKOUT_FIELDS = {}
