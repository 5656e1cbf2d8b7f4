"""SDK exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from cloudcontrol_sdk.models import APIResponseV2


class CloudControlError(Exception):
    """Base exception for all SDK errors."""


class CloudControlConfigurationError(CloudControlError):
    """Raised when the client configuration cannot supply a required value
    (for example the organization ID) before any request is sent."""


class CloudControlConnectionError(CloudControlError):
    """Raised when the client cannot connect to the server."""


class CloudControlTimeoutError(CloudControlError):
    """Raised when a request times out."""


class CloudControlProtocolError(CloudControlError):
    """Raised when a response does not match the expected API contract.

    Covers bodies that are not valid JSON, bodies that do not decode into the
    expected schema, and success envelopes missing an expected field.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class CloudControlAPIError(CloudControlError):
    """Raised when the API reports a failure response code."""

    def __init__(
        self,
        message: str,
        status_code: int,
        response_code: str,
        api_message: str,
        request_id: str = "",
        envelope: "APIResponseV2 | None" = None,
    ):
        self.status_code = status_code
        self.response_code = response_code
        self.api_message = api_message
        self.request_id = request_id
        self.envelope = envelope
        super().__init__(message)


class CloudControlAmbiguousResultError(CloudControlError):
    """Raised when a lookup by name matches more than one resource."""

    def __init__(self, message: str, total_count: int):
        self.total_count = total_count
        super().__init__(message)
