"""Synchronous CloudControl client (uses httpx)."""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional, Tuple

import httpx

from cloudcontrol_sdk import _customer_images as images
from cloudcontrol_sdk._base import _build_headers
from cloudcontrol_sdk.config import ClientConfig
from cloudcontrol_sdk.exceptions import CloudControlConnectionError, CloudControlTimeoutError
from cloudcontrol_sdk.models import CustomerImage, CustomerImages
from cloudcontrol_sdk.paging import Paging

logger = logging.getLogger(__name__)


class CloudControl:
    """Synchronous Python client for the CloudControl compute API.

    Usage::

        config = ClientConfig(region="au", username="me", password="...", organization_id="...")
        with CloudControl(config) as client:
            image = client.get_customer_image("5234e5c7-01de-4411-8b6e-baeb8d91cf5d")
            export_id = client.export_customer_image(image.id, "my-package")
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.config = config
        self._client = httpx.Client(
            base_url=config.base_url,
            headers=_build_headers(),
            auth=config.auth,
            timeout=config.timeout,
            transport=transport,
        )

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> "CloudControl":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _send(self, request: images.RequestSpec) -> Tuple[int, bytes]:
        logger.debug(f"{request.method} {request.path} params={request.params}")
        try:
            resp = self._client.request(
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

    def get_customer_image(self, image_id: str) -> Optional[CustomerImage]:
        """Retrieve a customer image by ID; ``None`` if it does not exist."""
        organization_id = self.config.resolve_organization_id()
        status_code, body = self._send(images.get_request(organization_id, image_id))
        return images.handle_get(status_code, body, image_id)

    def find_customer_image(self, name: str, datacenter_id: str) -> Optional[CustomerImage]:
        """Find a customer image by name in a data centre.

        Returns ``None`` if nothing matches and raises
        :class:`CloudControlAmbiguousResultError` if several images do.
        """
        organization_id = self.config.resolve_organization_id()
        status_code, body = self._send(images.find_request(organization_id, name, datacenter_id))
        return images.handle_find(status_code, body, name, datacenter_id)

    def list_customer_images_in_datacenter(
        self, datacenter_id: str, paging: Optional[Paging] = None
    ) -> CustomerImages:
        """List one page of customer images in a data centre."""
        organization_id = self.config.resolve_organization_id()
        status_code, body = self._send(images.list_request(organization_id, datacenter_id, paging))
        return images.handle_list(status_code, body, datacenter_id)

    def iter_customer_images_in_datacenter(
        self, datacenter_id: str, page_size: int = 50
    ) -> Iterator[CustomerImage]:
        """Yield every customer image in a data centre, one page at a time."""
        paging = Paging(page_size=page_size)
        while True:
            page = self.list_customer_images_in_datacenter(datacenter_id, paging)
            yield from page.images
            if images.is_last_page(page):
                return
            paging = paging.next()

    def export_customer_image(self, image_id: str, ovf_package_prefix: str) -> str:
        """Export a customer image as an OVF package; returns the export ID.

        The export runs asynchronously. The image's state is
        ``PENDING_CHANGE`` until the export completes, after which the package
        can be downloaded via FTPS.
        """
        organization_id = self.config.resolve_organization_id()
        status_code, body = self._send(
            images.export_request(organization_id, image_id, ovf_package_prefix)
        )
        export_id = images.handle_export(status_code, body, image_id, ovf_package_prefix)
        logger.info(f"Export of customer image '{image_id}' accepted (export ID {export_id})")
        return export_id
