"""
Wire models for the CloudControl customer image API.

Pydantic models mirror the JSON the API returns (camelCase aliases on
snake_case fields). Every model is frozen: a decoded record is a snapshot of
server state and is never mutated client-side.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, model_validator

from cloudcontrol_sdk.exceptions import CloudControlAPIError


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    def to_wire(self) -> Dict[str, Any]:
        """Encode using the API's field names."""
        return self.model_dump(by_alias=True, mode="json")


# ---------------------------------------------------------------------------
# Capabilities
# ---------------------------------------------------------------------------


class ResourceType(str, Enum):
    """Kinds of resource exposed by the compute API."""

    CUSTOMER_IMAGE = "customerImage"


class ImageType(str, Enum):
    """Image kinds (the provider also publishes OS images)."""

    OS = "os"
    CUSTOMER = "customer"


class EntityReference(_WireModel):
    """Lightweight (id, name) pointer to an entity."""

    id: str
    name: str = ""


@runtime_checkable
class Identifiable(Protocol):
    def get_id(self) -> str: ...

    def get_name(self) -> str: ...

    def to_entity_reference(self) -> EntityReference: ...


@runtime_checkable
class Stateful(Protocol):
    def get_resource_type(self) -> ResourceType: ...

    def get_state(self) -> str: ...

    def is_deleted(self) -> bool: ...


@runtime_checkable
class Describable(Protocol):
    def get_type(self) -> ImageType: ...

    def get_datacenter_id(self) -> str: ...

    def get_os(self) -> "OperatingSystem": ...


# ---------------------------------------------------------------------------
# API envelope
# ---------------------------------------------------------------------------


class NameValuePair(_WireModel):
    name: str
    value: str = ""


class APIResponseV2(_WireModel):
    """Generic response envelope returned for failures and side-effecting calls."""

    operation: str = ""
    response_code: str = Field("", alias="responseCode")
    message: str = ""
    info: List[NameValuePair] = Field(default_factory=list)
    warning: List[NameValuePair] = Field(default_factory=list)
    error: List[NameValuePair] = Field(default_factory=list)
    request_id: str = Field("", alias="requestId")

    def get_field_message(self, field_name: str) -> Optional[str]:
        """Value of the named ``info`` field, or ``None`` if it is absent."""
        for field in self.info:
            if field.name == field_name:
                return field.value
        return None

    def to_error(self, message: str, status_code: int) -> CloudControlAPIError:
        return CloudControlAPIError(
            message,
            status_code=status_code,
            response_code=self.response_code,
            api_message=self.message,
            request_id=self.request_id,
            envelope=self,
        )


# ---------------------------------------------------------------------------
# Customer images
# ---------------------------------------------------------------------------


class OperatingSystem(_WireModel):
    id: str = ""
    display_name: str = Field("", alias="displayName")
    family: str = ""


class VirtualMachineCPU(_WireModel):
    count: int = 0
    speed: str = ""
    cores_per_socket: int = Field(0, alias="coresPerSocket")


class VirtualMachineDisk(_WireModel):
    id: str = ""
    scsi_unit_id: int = Field(0, alias="scsiUnitId")
    size_gb: int = Field(0, alias="sizeGb")
    speed: str = ""


class ServerDeploymentConfiguration(_WireModel):
    """The image-derived part of a server deployment request."""

    image_id: str = Field("", alias="imageId")
    cpu: VirtualMachineCPU = Field(default_factory=VirtualMachineCPU)
    memory_gb: int = Field(0, alias="memoryGb")
    disks: List[VirtualMachineDisk] = Field(default_factory=list, alias="disk")


class CustomerImage(_WireModel):
    """A custom virtual machine image.

    Implements the :class:`Identifiable`, :class:`Stateful` and
    :class:`Describable` capabilities.
    """

    id: str
    name: str = ""
    description: str = ""
    datacenter_id: str = Field("", alias="datacenterId")
    operating_system: OperatingSystem = Field(
        default_factory=OperatingSystem, alias="operatingSystem"
    )
    cpu: VirtualMachineCPU = Field(default_factory=VirtualMachineCPU)
    memory_gb: int = Field(0, alias="memoryGb")
    disks: List[VirtualMachineDisk] = Field(default_factory=list, alias="disk")
    create_time: str = Field("", alias="createTime")
    state: str = ""

    def get_id(self) -> str:
        return self.id

    def get_name(self) -> str:
        return self.name

    def to_entity_reference(self) -> EntityReference:
        return EntityReference(id=self.id, name=self.name)

    def get_resource_type(self) -> ResourceType:
        return ResourceType.CUSTOMER_IMAGE

    def get_state(self) -> str:
        """Current state (e.g. ``NORMAL``, ``PENDING_CHANGE``)."""
        return self.state

    def is_deleted(self) -> bool:
        # A decoded record always exists; absence is represented by ``None``.
        return False

    def get_type(self) -> ImageType:
        return ImageType.CUSTOMER

    def get_datacenter_id(self) -> str:
        return self.datacenter_id

    def get_os(self) -> OperatingSystem:
        return self.operating_system

    def apply_to(
        self, config: ServerDeploymentConfiguration
    ) -> ServerDeploymentConfiguration:
        """Return a copy of ``config`` that deploys from this image."""
        return config.model_copy(
            update={
                "image_id": self.id,
                "cpu": self.cpu,
                "memory_gb": self.memory_gb,
                "disks": list(self.disks),
            }
        )


class CustomerImages(_WireModel):
    """A single page of customer images."""

    images: List[CustomerImage] = Field(default_factory=list, alias="customerImage")
    page_number: int = Field(0, alias="pageNumber")
    # Number of images in this page, not the number of pages.
    page_count: int = Field(0, alias="pageCount")
    total_count: int = Field(0, alias="totalCount")
    page_size: int = Field(0, alias="pageSize")

    @model_validator(mode="after")
    def check_page_counts(self) -> "CustomerImages":
        if len(self.images) != self.page_count:
            raise ValueError(
                f"page holds {len(self.images)} images but pageCount is {self.page_count}"
            )
        if self.page_size > 0 and len(self.images) > self.page_size:
            raise ValueError(
                f"page holds {len(self.images)} images but pageSize is {self.page_size}"
            )
        return self
