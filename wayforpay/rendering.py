"""
Browser-facing renderings of a prepared PURCHASE field map.

These helpers only format; the field map must already be signed and
validated by the request builder. Values are HTML-escaped for forms and
JSON-encoded (with ``/`` escaped) for the widget script.
"""

import html
import json
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Optional
from urllib.parse import urlencode

from wayforpay.constants import PURCHASE_URL, WIDGET_URL
from wayforpay.engine.signature import scalar_text

DEFAULT_WIDGET_CALLBACK = "receiveMessage"


def _hidden_input(name: str, value: Any) -> str:
    return '<input type="hidden" name="{}" value="{}" />'.format(
        html.escape(name), html.escape(scalar_text(value))
    )


def render_form(fields: Mapping[str, Any], action: str = PURCHASE_URL) -> str:
    """Self-submitting POST form with one hidden input per field."""
    parts = [f'<form method="POST" action="{html.escape(action)}" accept-charset="utf-8">']
    for key, value in fields.items():
        if isinstance(value, (list, tuple)):
            parts.extend(_hidden_input(f"{key}[]", item) for item in value)
        else:
            parts.append(_hidden_input(key, value))
    parts.append('<input type="submit" value="Submit purchase form"></form>')
    return "".join(parts)


def _query_pairs(fields: Mapping[str, Any]) -> list[tuple[str, str]]:
    # Sequences use indexed keys: productName[0]=...&productName[1]=...
    pairs: list[tuple[str, str]] = []
    for key, value in fields.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((f"{key}[{i}]", scalar_text(item)) for i, item in enumerate(value))
        elif isinstance(value, bool):
            pairs.append((key, "1" if value else "0"))
        else:
            pairs.append((key, scalar_text(value)))
    return pairs


def render_purchase_url(fields: Mapping[str, Any], base_url: str = PURCHASE_URL) -> str:
    """GET redirect URL to the hosted payment page."""
    return f"{base_url}/get?{urlencode(_query_pairs(fields))}"


def _json_value(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    return str(value)


def widget_json(fields: Mapping[str, Any]) -> str:
    """JSON literal safe to embed inside a <script> element."""
    return json.dumps(dict(fields), default=_json_value).replace("/", "\\/")


def render_widget(fields: Mapping[str, Any], callback: Optional[str] = None) -> str:
    """Widget loader script, pay() launcher and a button that calls it."""
    callback = callback or DEFAULT_WIDGET_CALLBACK
    return f"""<script id="widget-wfp-script" language="javascript" type="text/javascript" src="{WIDGET_URL}"></script>
<script type="text/javascript">
    var wayforpay = new Wayforpay();
    var pay = function () {{
        wayforpay.run({widget_json(fields)});
    }}
    window.addEventListener("message", {callback});
    function receiveMessage(event)
    {{
        if (
            event.data == "WfpWidgetEventClose" ||
            event.data == "WfpWidgetEventApproved" ||
            event.data == "WfpWidgetEventDeclined" ||
            event.data == "WfpWidgetEventPending")
        {{
            console.log(event.data);
        }}
    }}
</script>
<button type="button" onclick="pay();">Pay</button>"""
