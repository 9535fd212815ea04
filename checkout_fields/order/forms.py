from typing import TYPE_CHECKING

from django import forms

from ..core.sanitize import is_truthy, sanitize_text_field, sanitize_textarea_field
from . import IS_COMPANY_META_KEY

if TYPE_CHECKING:
    from ..core.config import CheckoutFieldsConfig

MULTILINE_FIELDS = frozenset({"billing_company_address"})


class CompanyDetailsForm(forms.Form):
    """Admin form for editing an order's company details."""

    billing_is_company = forms.BooleanField(required=False)

    def __init__(self, *args, config: "CheckoutFieldsConfig", **kwargs):
        super().__init__(*args, **kwargs)
        self.config = config
        self.fields[IS_COMPANY_META_KEY].label = config.vat_checkbox_label
        for key, label in config.get_vat_fields().items():
            widget = forms.Textarea if key in MULTILINE_FIELDS else forms.TextInput
            self.fields[key] = forms.CharField(
                label=label, required=False, strip=False, widget=widget
            )

    def clean_billing_is_company(self):
        # Same coercion as checkout, so "no" or "0" never mean checked.
        return is_truthy(self.data.get(self.add_prefix(IS_COMPANY_META_KEY)))

    def clean(self):
        cleaned_data = super().clean()
        for key in self.config.get_vat_fields():
            if key in MULTILINE_FIELDS:
                cleaned_data[key] = sanitize_textarea_field(cleaned_data.get(key))
            else:
                cleaned_data[key] = sanitize_text_field(cleaned_data.get(key))
        return cleaned_data
