from __future__ import annotations

import copy
import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from cloudcontrol_sdk.config import ClientConfig

ORG_ID = "a4f484de-b9ed-43e4-b565-afbf69417615"

CUSTOMER_IMAGE: Dict[str, Any] = {
    "id": "5234e5c7-01de-4411-8b6e-baeb8d91cf5d",
    "name": "ImportedCustomerImage",
    "description": "My nice customer image",
    "datacenterId": "NA9",
    "operatingSystem": {
        "id": "CENTOS764",
        "displayName": "CENTOS7/64",
        "family": "UNIX",
    },
    "cpu": {"count": 2, "speed": "STANDARD", "coresPerSocket": 1},
    "memoryGb": 4,
    "disk": [
        {"id": "55bd1c4d-ec26-4d54-8e5f-6f48c4b0b7f3", "scsiUnitId": 0, "sizeGb": 10, "speed": "STANDARD"},
        {"id": "e1b0c5b4-4d4a-4d6c-a8b0-2f3d7a3d7c11", "scsiUnitId": 1, "sizeGb": 50, "speed": "HIGHPERFORMANCE"},
    ],
    "createTime": "2016-03-04T06:06:06.000Z",
    "state": "NORMAL",
}


def image_json(**overrides: Any) -> Dict[str, Any]:
    data = copy.deepcopy(CUSTOMER_IMAGE)
    data.update(overrides)
    return data


def page_json(images: List[Dict[str, Any]], total_count: int | None = None, page_number: int = 1, page_size: int = 50) -> Dict[str, Any]:
    return {
        "customerImage": images,
        "pageNumber": page_number,
        "pageCount": len(images),
        "totalCount": len(images) if total_count is None else total_count,
        "pageSize": page_size,
    }


def envelope_json(response_code: str, message: str = "", info: Dict[str, str] | None = None) -> Dict[str, Any]:
    return {
        "operation": "OPERATION",
        "responseCode": response_code,
        "message": message,
        "info": [{"name": k, "value": v} for k, v in (info or {}).items()],
        "warning": [],
        "error": [],
        "requestId": "na9_20160321T074626030-0400_7e9fffe7-190b-46f2-9107-9d52fe57d0ad",
    }


class RecordingHandler:
    """MockTransport handler that records requests and replays canned responses."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]):
        self.responder = responder
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


def respond(status_code: int, body: Any) -> RecordingHandler:
    return RecordingHandler(lambda request: httpx.Response(status_code, json=body))


@pytest.fixture()
def config() -> ClientConfig:
    return ClientConfig(
        base_url="https://api-test.example.com",
        username="user1",
        password="password1",
        organization_id=ORG_ID,
    )
