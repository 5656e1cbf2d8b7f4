"""Request builders and response handlers for customer image operations.

Both clients send the :class:`RequestSpec` built here and pass the raw
status code and body back to the matching ``handle_*`` function, so the
sync and async clients share one set of rules.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from cloudcontrol_sdk._base import API_VERSION_2_2, API_VERSION_2_4, _caas_path, _escape
from cloudcontrol_sdk.classifier import (
    Body,
    Outcome,
    classify,
    decode_payload,
    require_field,
    unwrap_single,
)
from cloudcontrol_sdk.models import CustomerImage, CustomerImages
from cloudcontrol_sdk.paging import Paging

IMAGE_EXPORT_ID_FIELD = "imageExportId"


@dataclass(frozen=True)
class RequestSpec:
    method: str
    path: str
    params: Dict[str, Any] = field(default_factory=dict)
    json: Optional[Dict[str, Any]] = None


def _error_suffix(status_code: int, response_code: str, message: str) -> str:
    return f"failed with status code {status_code} ({response_code}): {message}"


# ---------------------------------------------------------------------------
# get
# ---------------------------------------------------------------------------


def get_request(organization_id: str, image_id: str) -> RequestSpec:
    return RequestSpec(
        "GET",
        _caas_path(API_VERSION_2_2, organization_id, f"image/customerImage/{_escape(image_id)}"),
    )


def handle_get(status_code: int, body: Body, image_id: str) -> Optional[CustomerImage]:
    result = classify(status_code, body)
    if result.outcome is Outcome.SUCCESS:
        return decode_payload(CustomerImage, body, status_code)
    if result.outcome is Outcome.NOT_FOUND:
        return None

    envelope = result.envelope
    raise envelope.to_error(
        f"Request to retrieve customer image '{image_id}' "
        + _error_suffix(status_code, envelope.response_code, envelope.message),
        status_code,
    )


# ---------------------------------------------------------------------------
# find by name
# ---------------------------------------------------------------------------


def find_request(organization_id: str, name: str, datacenter_id: str) -> RequestSpec:
    return RequestSpec(
        "GET",
        _caas_path(API_VERSION_2_2, organization_id, "image/customerImage"),
        params={"name": name, "datacenterId": datacenter_id},
    )


def handle_find(
    status_code: int, body: Body, name: str, datacenter_id: str
) -> Optional[CustomerImage]:
    result = classify(status_code, body)
    if result.outcome is not Outcome.SUCCESS:
        envelope = result.envelope
        raise envelope.to_error(
            f"Request to find customer image '{name}' in data centre '{datacenter_id}' "
            + _error_suffix(status_code, envelope.response_code, envelope.message),
            status_code,
        )

    page = decode_payload(CustomerImages, body, status_code)
    return unwrap_single(page, name, datacenter_id)


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


def list_request(
    organization_id: str, datacenter_id: str, paging: Optional[Paging]
) -> RequestSpec:
    params: Dict[str, Any] = {"datacenterId": datacenter_id}
    params.update(Paging.ensure(paging).to_query_parameters())
    return RequestSpec(
        "GET",
        _caas_path(API_VERSION_2_2, organization_id, "image/customerImage"),
        params=params,
    )


def handle_list(status_code: int, body: Body, datacenter_id: str) -> CustomerImages:
    result = classify(status_code, body)
    if result.outcome is not Outcome.SUCCESS:
        envelope = result.envelope
        raise envelope.to_error(
            f"Request to list customer images in data centre '{datacenter_id}' "
            + _error_suffix(status_code, envelope.response_code, envelope.message),
            status_code,
        )
    return decode_payload(CustomerImages, body, status_code)


def is_last_page(page: CustomerImages) -> bool:
    """Whether ``page`` is the final page, judged by the sizes the server reports.

    The server may cap the page size below what was requested.
    """
    if page.page_count == 0:
        return True
    if page.page_size <= 0:
        return False
    if page.page_count < page.page_size:
        return True
    return page.page_number * page.page_size >= page.total_count


# ---------------------------------------------------------------------------
# export
# ---------------------------------------------------------------------------


def export_request(organization_id: str, image_id: str, ovf_package_prefix: str) -> RequestSpec:
    return RequestSpec(
        "POST",
        _caas_path(API_VERSION_2_4, organization_id, "image/exportImage"),
        json={"imageId": image_id, "ovfPackagePrefix": ovf_package_prefix},
    )


def handle_export(
    status_code: int, body: Body, image_id: str, ovf_package_prefix: str
) -> str:
    result = classify(status_code, body, success_code=None)
    envelope = result.envelope
    if result.outcome is not Outcome.IN_PROGRESS:
        raise envelope.to_error(
            f"Request to export customer image '{image_id}' with OVF package prefix "
            f"'{ovf_package_prefix}' "
            + _error_suffix(status_code, envelope.response_code, envelope.message),
            status_code,
        )

    # Expected: "info": [{"name": "imageExportId", "value": "<export operation ID>"}]
    return require_field(envelope, IMAGE_EXPORT_ID_FIELD, status_code)
