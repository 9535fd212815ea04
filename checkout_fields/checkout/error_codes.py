from enum import Enum


class CheckoutFieldsErrorCode(str, Enum):
    REQUIRED = "required"
