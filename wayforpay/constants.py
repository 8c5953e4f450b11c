"""Fixed gateway endpoints and wire-format constants."""

from typing import Final

PURCHASE_URL: Final = "https://secure.wayforpay.com/pay"
API_URL: Final = "https://api.wayforpay.com/api"
WIDGET_URL: Final = "https://secure.wayforpay.com/server/pay-widget.js"

FIELDS_DELIMITER: Final = ";"
API_VERSION: Final = 1
DEFAULT_CHARSET: Final = "utf8"

# Spellings of the default charset that skip transcoding
DEFAULT_CHARSET_ALIASES: Final = frozenset({"utf8", "utf-8"})

JSON_CONTENT_TYPE: Final = "application/json;charset=utf-8"
