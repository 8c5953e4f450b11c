"""Tests for the browser-facing purchase renderings."""

from urllib.parse import parse_qsl, urlsplit

from conftest import PURCHASE_SIGNATURE
from wayforpay.constants import PURCHASE_URL, WIDGET_URL
from wayforpay.rendering import render_form, render_purchase_url, render_widget, widget_json


class TestForm:
    def test_structure(self):
        form = render_form({"orderReference": "A-1", "amount": 10})
        assert form.startswith(f'<form method="POST" action="{PURCHASE_URL}" accept-charset="utf-8">')
        assert '<input type="hidden" name="orderReference" value="A-1" />' in form
        assert '<input type="hidden" name="amount" value="10" />' in form
        assert form.endswith('<input type="submit" value="Submit purchase form"></form>')

    def test_sequences_use_array_names(self):
        form = render_form({"productName": ["Saturn", "Memory"]})
        assert '<input type="hidden" name="productName[]" value="Saturn" />' in form
        assert '<input type="hidden" name="productName[]" value="Memory" />' in form

    def test_values_escaped(self):
        form = render_form({"productName": ['<script>"x"</script>'], "comment": "a & b"})
        assert "<script>" not in form
        assert "&lt;script&gt;&quot;x&quot;&lt;/script&gt;" in form
        assert 'value="a &amp; b"' in form


class TestPurchaseUrl:
    def test_indexed_sequences(self):
        url = render_purchase_url({"orderReference": "A-1", "productName": ["Saturn BUE 1.2", "Memory"]})
        parts = urlsplit(url)
        assert f"{parts.scheme}://{parts.netloc}{parts.path}" == f"{PURCHASE_URL}/get"
        assert parse_qsl(parts.query) == [
            ("orderReference", "A-1"),
            ("productName[0]", "Saturn BUE 1.2"),
            ("productName[1]", "Memory"),
        ]

    def test_none_skipped_and_bools(self):
        url = render_purchase_url({"a": None, "b": True, "c": False})
        assert parse_qsl(urlsplit(url).query) == [("b", "1"), ("c", "0")]


class TestWidget:
    def test_embeds_script_and_json(self):
        fields = {"merchantSignature": PURCHASE_SIGNATURE, "returnUrl": "https://shop.ua/done"}
        widget = render_widget(fields)
        assert f'src="{WIDGET_URL}"' in widget
        assert f'"merchantSignature": "{PURCHASE_SIGNATURE}"' in widget
        assert "https:\\/\\/shop.ua\\/done" in widget
        assert 'window.addEventListener("message", receiveMessage);' in widget

    def test_custom_callback(self):
        widget = render_widget({"a": "b"}, callback="onWidgetMessage")
        assert 'window.addEventListener("message", onWidgetMessage);' in widget

    def test_json_cannot_close_script(self):
        assert "</script>" not in widget_json({"comment": "</script><script>alert(1)"})
