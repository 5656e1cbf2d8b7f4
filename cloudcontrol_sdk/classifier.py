"""Response classification shared by every customer image operation.

A raw (status code, body) pair ends up as exactly one of:

* ``SUCCESS``: the status matches the operation's success code; the body is
  the operation's payload and the envelope is never looked at.
* ``NOT_FOUND``: the envelope reports ``RESOURCE_NOT_FOUND``.
* ``IN_PROGRESS``: the envelope reports ``IN_PROGRESS`` (long-running
  operation accepted).
* ``ERROR``: anything else.

Bodies that cannot be decoded raise :class:`CloudControlProtocolError`; they
indicate a contract violation, so nothing here retries.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from cloudcontrol_sdk._base import RESPONSE_CODE_IN_PROGRESS, RESPONSE_CODE_RESOURCE_NOT_FOUND
from cloudcontrol_sdk.exceptions import (
    CloudControlAmbiguousResultError,
    CloudControlProtocolError,
)
from cloudcontrol_sdk.models import APIResponseV2, CustomerImage, CustomerImages

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
Body = Union[bytes, str]


class Outcome(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    IN_PROGRESS = "in_progress"
    ERROR = "error"


@dataclass(frozen=True)
class Classification:
    outcome: Outcome
    status_code: int
    envelope: Optional[APIResponseV2] = None


def decode_payload(model: Type[ModelT], body: Body, status_code: Optional[int] = None) -> ModelT:
    """Strictly decode ``body`` as ``model``."""
    try:
        return model.model_validate_json(body)
    except ValidationError as exc:
        raise CloudControlProtocolError(
            f"Unable to decode response body as {model.__name__}: {exc}",
            status_code=status_code,
        ) from exc


def read_api_response(body: Body, status_code: int) -> APIResponseV2:
    """Decode ``body`` as the generic API envelope."""
    try:
        return APIResponseV2.model_validate_json(body)
    except ValidationError as exc:
        raise CloudControlProtocolError(
            f"Unable to read API response (status code {status_code}): {exc}",
            status_code=status_code,
        ) from exc


def classify(status_code: int, body: Body, success_code: Optional[int] = 200) -> Classification:
    """Classify a response.

    ``success_code=None`` is for side-effecting operations, whose responses
    always carry an envelope and are classified by response code alone.
    """
    if success_code is not None and status_code == success_code:
        return Classification(Outcome.SUCCESS, status_code)

    envelope = read_api_response(body, status_code)
    if envelope.response_code == RESPONSE_CODE_RESOURCE_NOT_FOUND:
        outcome = Outcome.NOT_FOUND
    elif envelope.response_code == RESPONSE_CODE_IN_PROGRESS:
        outcome = Outcome.IN_PROGRESS
    else:
        outcome = Outcome.ERROR
    return Classification(outcome, status_code, envelope)


def require_field(envelope: APIResponseV2, field_name: str, status_code: int) -> str:
    """Return the named ``info`` value of an accepted operation.

    A missing field means the API returned a malformed success response.
    """
    value = envelope.get_field_message(field_name)
    if value is None:
        raise CloudControlProtocolError(
            f"Received an unexpected response (missing '{field_name}') with status code "
            f"{status_code} ({envelope.response_code}): {envelope.message}",
            status_code=status_code,
        )
    return value


def unwrap_single(page: CustomerImages, name: str, datacenter_id: str) -> Optional[CustomerImage]:
    """Reduce a name-filtered page to at most one image.

    Names are not unique server-side, so more than one match is an error,
    while no match at all is simply ``None``.
    """
    if page.page_count == 0:
        return None
    if page.page_count != 1:
        logger.warning(
            f"Name lookup for '{name}' in data centre '{datacenter_id}' matched {page.total_count} images"
        )
        raise CloudControlAmbiguousResultError(
            f"Found multiple images ({page.total_count}) matching '{name}' in data centre '{datacenter_id}'.",
            total_count=page.total_count,
        )
    return page.images[0]
