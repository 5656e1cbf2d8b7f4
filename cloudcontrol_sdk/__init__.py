"""CloudControl SDK — Python client for the CloudControl compute API (customer images)."""

from cloudcontrol_sdk.client import CloudControl
from cloudcontrol_sdk.async_client import AsyncCloudControl
from cloudcontrol_sdk.config import ClientConfig
from cloudcontrol_sdk.exceptions import (
    CloudControlError,
    CloudControlAPIError,
    CloudControlAmbiguousResultError,
    CloudControlConfigurationError,
    CloudControlConnectionError,
    CloudControlProtocolError,
    CloudControlTimeoutError,
)
from cloudcontrol_sdk.models import (
    APIResponseV2,
    CustomerImage,
    CustomerImages,
    EntityReference,
    ServerDeploymentConfiguration,
)
from cloudcontrol_sdk.paging import Paging

__all__ = [
    "CloudControl",
    "AsyncCloudControl",
    "ClientConfig",
    "CloudControlError",
    "CloudControlAPIError",
    "CloudControlAmbiguousResultError",
    "CloudControlConfigurationError",
    "CloudControlConnectionError",
    "CloudControlProtocolError",
    "CloudControlTimeoutError",
    "APIResponseV2",
    "CustomerImage",
    "CustomerImages",
    "EntityReference",
    "ServerDeploymentConfiguration",
    "Paging",
]

__version__ = "0.1.0"
