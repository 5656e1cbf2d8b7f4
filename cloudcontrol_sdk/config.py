"""Client configuration.

Every client is built from an explicit :class:`ClientConfig`; there is no
module-level shared client or session.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Tuple, Union

from dotenv import load_dotenv

from cloudcontrol_sdk._base import DEFAULT_BASE_URL_TEMPLATE, DEFAULT_TIMEOUT
from cloudcontrol_sdk.exceptions import CloudControlConfigurationError

OrganizationProvider = Callable[[], str]


def _redact(value: str) -> str:
    """Redact a secret for display, keeping 4 leading and 2 trailing chars."""
    if len(value) < 8:
        return "***"
    return f"{value[:4]}***{value[-2:]}"


@dataclass
class ClientConfig:
    """Connection settings for a CloudControl client.

    The organization ID namespaces every request path. Supply it directly via
    ``organization_id`` or lazily via ``organization_provider``; if neither
    yields a value the operation fails before anything is sent.
    """

    region: str = "au"
    base_url: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)
    organization_id: Optional[str] = None
    organization_provider: Optional[OrganizationProvider] = field(default=None, repr=False)
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.base_url:
            self.base_url = DEFAULT_BASE_URL_TEMPLATE.format(region=self.region)
        self.base_url = self.base_url.rstrip("/")

    def __repr__(self) -> str:
        password = _redact(self.password) if self.password else None
        return (
            f"ClientConfig(region={self.region!r}, base_url={self.base_url!r}, "
            f"username={self.username!r}, password={password!r}, "
            f"organization_id={self.organization_id!r}, timeout={self.timeout!r})"
        )

    @property
    def auth(self) -> Optional[Tuple[str, str]]:
        if self.username and self.password:
            return (self.username, self.password)
        return None

    def resolve_organization_id(self) -> str:
        if self.organization_id:
            return self.organization_id
        if self.organization_provider is not None:
            try:
                organization_id = self.organization_provider()
            except Exception as exc:
                raise CloudControlConfigurationError(
                    f"Unable to resolve organization ID: {exc}"
                ) from exc
            if organization_id:
                return organization_id
        raise CloudControlConfigurationError(
            "No organization ID configured (set organization_id, organization_provider "
            "or CLOUDCONTROL_ORGANIZATION_ID)"
        )

    @classmethod
    def from_env(cls, dotenv_path: Optional[Union[str, Path]] = None) -> "ClientConfig":
        """Build a config from ``CLOUDCONTROL_*`` environment variables.

        Values in ``dotenv_path`` (or a ``.env`` found from the working
        directory) are loaded first but never override the real environment.
        """
        load_dotenv(dotenv_path=dotenv_path)

        timeout_raw = os.environ.get("CLOUDCONTROL_TIMEOUT")
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
        except ValueError as exc:
            raise CloudControlConfigurationError(
                f"CLOUDCONTROL_TIMEOUT must be a number, got {timeout_raw!r}"
            ) from exc

        return cls(
            region=os.environ.get("CLOUDCONTROL_REGION", "au"),
            base_url=os.environ.get("CLOUDCONTROL_BASE_URL") or None,
            username=os.environ.get("CLOUDCONTROL_USER") or None,
            password=os.environ.get("CLOUDCONTROL_PASSWORD") or None,
            organization_id=os.environ.get("CLOUDCONTROL_ORGANIZATION_ID") or None,
            timeout=timeout,
        )
