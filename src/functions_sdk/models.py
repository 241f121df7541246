"""Typed request bodies, response payloads and invocation outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Annotated, Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .exceptions import FunctionsError, FunctionsValidationError


class FunctionRegion(str, Enum):
    """Deployment regions a function can be pinned to.

    ``ANY`` leaves placement to the platform and is never sent on the wire.
    """

    ANY = "any"
    AP_NORTHEAST_1 = "ap-northeast-1"
    AP_NORTHEAST_2 = "ap-northeast-2"
    AP_SOUTH_1 = "ap-south-1"
    AP_SOUTHEAST_1 = "ap-southeast-1"
    AP_SOUTHEAST_2 = "ap-southeast-2"
    CA_CENTRAL_1 = "ca-central-1"
    EU_CENTRAL_1 = "eu-central-1"
    EU_WEST_1 = "eu-west-1"
    EU_WEST_2 = "eu-west-2"
    EU_WEST_3 = "eu-west-3"
    SA_EAST_1 = "sa-east-1"
    US_EAST_1 = "us-east-1"
    US_WEST_1 = "us-west-1"
    US_WEST_2 = "us-west-2"

    def __str__(self) -> str:
        return self.value


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    def __str__(self) -> str:
        return self.value


class FunctionsModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )


# Request bodies


class FileBody(FunctionsModel):
    kind: Literal["file"] = "file"
    data: bytes


class BlobBody(FunctionsModel):
    kind: Literal["blob"] = "blob"
    data: bytes


class ArrayBufferBody(FunctionsModel):
    kind: Literal["array_buffer"] = "array_buffer"
    data: bytes


class StringBody(FunctionsModel):
    kind: Literal["string"] = "string"
    data: str


class FormDataBody(FunctionsModel):
    kind: Literal["form_data"] = "form_data"
    data: dict[str, str]


class JsonBody(FunctionsModel):
    kind: Literal["json"] = "json"
    data: dict[str, Any]


InvokeBody = Annotated[
    Union[FileBody, BlobBody, ArrayBufferBody, StringBody, FormDataBody, JsonBody],
    Field(discriminator="kind"),
]

BINARY_BODIES = (FileBody, BlobBody, ArrayBufferBody)


def body_from_value(value: Any) -> InvokeBody:
    """Pick the body variant matching a plain Python value."""
    if isinstance(value, (FileBody, BlobBody, ArrayBufferBody, StringBody, FormDataBody, JsonBody)):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return BlobBody(data=bytes(value))
    if isinstance(value, str):
        return StringBody(data=value)
    if isinstance(value, Mapping):
        return JsonBody(data=dict(value))
    raise FunctionsValidationError(f"Unsupported body type: {type(value).__name__}")


# Response payloads


class JsonData(FunctionsModel):
    kind: Literal["json"] = "json"
    data: Any = None


class TextData(FunctionsModel):
    kind: Literal["text"] = "text"
    data: str


class BytesData(FunctionsModel):
    kind: Literal["bytes"] = "bytes"
    data: bytes


class FormData(FunctionsModel):
    kind: Literal["form_data"] = "form_data"
    data: dict[str, str]


ResponseData = Annotated[
    Union[JsonData, TextData, BytesData, FormData],
    Field(discriminator="kind"),
]

ResponseDataAdapter: TypeAdapter[Any] = TypeAdapter(ResponseData)

FORM_FIELDS_ADAPTER: TypeAdapter[dict[str, str]] = TypeAdapter(dict[str, str])


# Invocation outcomes


@dataclass(frozen=True)
class Success:
    data: ResponseData
    status_code: int = 200
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> ResponseData:
        return self.data


@dataclass(frozen=True)
class Failure:
    error: FunctionsError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> ResponseData:
        raise self.error


FunctionsResponse = Union[Success, Failure]
