"""Asynchronous CloudControl client (uses httpx.AsyncClient)."""

from __future__ import annotations

import logging
from typing import Any, AsyncIterator, Optional, Tuple

import httpx

from cloudcontrol_sdk import _customer_images as images
from cloudcontrol_sdk._base import _build_headers
from cloudcontrol_sdk.config import ClientConfig
from cloudcontrol_sdk.exceptions import CloudControlConnectionError, CloudControlTimeoutError
from cloudcontrol_sdk.models import CustomerImage, CustomerImages
from cloudcontrol_sdk.paging import Paging

logger = logging.getLogger(__name__)


class AsyncCloudControl:
    """Async Python client for the CloudControl compute API.

    Usage::

        async with AsyncCloudControl(ClientConfig.from_env()) as client:
            image = await client.find_customer_image("my-image", "AU9")
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            headers=_build_headers(),
            auth=config.auth,
            timeout=config.timeout,
            transport=transport,
        )

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    async def __aenter__(self) -> "AsyncCloudControl":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    async def _send(self, request: images.RequestSpec) -> Tuple[int, bytes]:
        logger.debug(f"{request.method} {request.path} params={request.params}")
        try:
            resp = await self._client.request(
                request.method,
                request.path,
                params=request.params or None,
                json=request.json,
            )
        except httpx.TimeoutException as exc:
            raise CloudControlTimeoutError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise CloudControlConnectionError(str(exc)) from exc

        logger.debug(f"{request.method} {request.path} -> {resp.status_code}")
        return resp.status_code, resp.content

    # ------------------------------------------------------------------
    # Customer images
    # ------------------------------------------------------------------

    async def get_customer_image(self, image_id: str) -> Optional[CustomerImage]:
        """Retrieve a customer image by ID; ``None`` if it does not exist."""
        organization_id = self.config.resolve_organization_id()
        status_code, body = await self._send(images.get_request(organization_id, image_id))
        return images.handle_get(status_code, body, image_id)

    async def find_customer_image(self, name: str, datacenter_id: str) -> Optional[CustomerImage]:
        """Find a customer image by name in a data centre."""
        organization_id = self.config.resolve_organization_id()
        status_code, body = await self._send(
            images.find_request(organization_id, name, datacenter_id)
        )
        return images.handle_find(status_code, body, name, datacenter_id)

    async def list_customer_images_in_datacenter(
        self, datacenter_id: str, paging: Optional[Paging] = None
    ) -> CustomerImages:
        """List one page of customer images in a data centre."""
        organization_id = self.config.resolve_organization_id()
        status_code, body = await self._send(
            images.list_request(organization_id, datacenter_id, paging)
        )
        return images.handle_list(status_code, body, datacenter_id)

    async def iter_customer_images_in_datacenter(
        self, datacenter_id: str, page_size: int = 50
    ) -> AsyncIterator[CustomerImage]:
        """Yield every customer image in a data centre, one page at a time."""
        paging = Paging(page_size=page_size)
        while True:
            page = await self.list_customer_images_in_datacenter(datacenter_id, paging)
            for image in page.images:
                yield image
            if images.is_last_page(page):
                return
            paging = paging.next()

    async def export_customer_image(self, image_id: str, ovf_package_prefix: str) -> str:
        """Export a customer image as an OVF package; returns the export ID."""
        organization_id = self.config.resolve_organization_id()
        status_code, body = await self._send(
            images.export_request(organization_id, image_id, ovf_package_prefix)
        )
        export_id = images.handle_export(status_code, body, image_id, ovf_package_prefix)
        logger.info(f"Export of customer image '{image_id}' accepted (export ID {export_id})")
        return export_id
