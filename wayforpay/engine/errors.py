"""
Local validation errors raised while assembling a gateway request.

Every error here is raised before any network call and is never retried
internally: the caller corrects the input and prepares the request again.
Transport failures (httpx errors, undecodable response bodies) are not
wrapped and reach the caller unchanged.
"""

from typing import Iterable


class WayForPayError(Exception):
    """Base exception for request assembly failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidConfiguration(WayForPayError):
    """Merchant account or password missing at construction."""


class EmptyInput(WayForPayError):
    """No fields were supplied to prepare."""

    def __init__(self, message: str = "Arguments must be not empty"):
        super().__init__(message)


class UnknownTransactionType(WayForPayError):
    """Transaction type is not in the catalog."""

    def __init__(self, value: object):
        super().__init__(f"Unknown transaction type: {value}")
        self.value = value


class _FieldListError(WayForPayError):
    """Error that names every offending field at once."""

    label = "field"

    def __init__(self, fields: Iterable[str]):
        self.fields = list(fields)
        super().__init__(f"Missed {self.label}(s): {', '.join(self.fields)}.")


class MissingSignatureFields(_FieldListError):
    """One or more signature inputs are absent from the field map."""

    label = "signature field"


class MissingRequiredFields(_FieldListError):
    """One or more required fields are absent or empty."""

    label = "required field"


class EncodingUnsupported(WayForPayError):
    """The configured charset has no codec on this runtime."""

    def __init__(self, charset: str):
        super().__init__(f"Cannot transcode from charset '{charset}': no codec available")
        self.charset = charset
