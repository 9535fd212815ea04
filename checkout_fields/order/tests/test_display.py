from ..display import (
    render_email_order_meta,
    render_order_details_meta,
)


def test_render_email_plain_text(company_order, vat_config):
    text = render_email_order_meta(company_order, True, vat_config)

    assert text == (
        "\nCompany information\n"
        "Company name: Acme UAB\n"
        "Company code: 304567891\n"
        "VAT number: LT100011223344\n\n"
    )


def test_render_email_html_skips_empty_values(company_order, vat_config):
    # given
    company_order.private_metadata["billing_company_name"] = "Acme & Sons"

    # when
    html = render_email_order_meta(company_order, False, vat_config)

    # then
    assert "Company information</h2>" in html
    assert "Acme &amp; Sons" in html
    assert html.count("<tr>") == 3
    assert "Company address" not in html


def test_render_email_for_private_order(order, vat_config):
    assert render_email_order_meta(order, True, vat_config) == ""
    assert render_email_order_meta(order, False, vat_config) == ""
    assert render_email_order_meta(None, False, vat_config) == ""


def test_render_order_details_meta(company_order, vat_config):
    html = render_order_details_meta(company_order, vat_config)

    assert html.startswith('<section class="woocommerce-company-details">')
    assert "<tr><th>VAT number:</th><td>LT100011223344</td></tr>" in html


def test_render_order_details_meta_private_order(order, vat_config):
    assert render_order_details_meta(order, vat_config) == ""
