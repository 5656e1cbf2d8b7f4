"""Shared constants and helpers used by both sync and async clients."""

from __future__ import annotations

from typing import Dict
from urllib.parse import quote

DEFAULT_BASE_URL_TEMPLATE = "https://api-{region}.dimensiondata.com"
DEFAULT_TIMEOUT = 30.0

API_VERSION_2_2 = "2.2"
API_VERSION_2_4 = "2.4"

# Response codes that change how a response is classified.
RESPONSE_CODE_OK = "OK"
RESPONSE_CODE_IN_PROGRESS = "IN_PROGRESS"
RESPONSE_CODE_RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"

USER_AGENT = "cloudcontrol-sdk-python"


def _build_headers() -> Dict[str, str]:
    return {
        "Accept": "application/json",
        "Content-Type": "application/json",
        "User-Agent": USER_AGENT,
    }


def _escape(value: str) -> str:
    """Escape a single path segment (slashes included)."""
    return quote(value, safe="")


def _caas_path(api_version: str, organization_id: str, relative_path: str) -> str:
    """Build ``/caas/{version}/{org}/{relative_path}``."""
    return f"/caas/{api_version}/{_escape(organization_id)}/{relative_path.lstrip('/')}"
