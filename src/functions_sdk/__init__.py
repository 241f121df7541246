"""Python client for invoking edge functions over HTTP."""

from .client import AsyncFunctionsClient, FunctionsClient
from .exceptions import (
    FunctionsError,
    FunctionsFetchError,
    FunctionsHttpError,
    FunctionsRelayError,
    FunctionsValidationError,
)
from .models import (
    ArrayBufferBody,
    BlobBody,
    BytesData,
    Failure,
    FileBody,
    FormData,
    FormDataBody,
    FunctionRegion,
    FunctionsResponse,
    HttpMethod,
    InvokeBody,
    JsonBody,
    JsonData,
    ResponseData,
    ResponseDataAdapter,
    StringBody,
    Success,
    TextData,
    body_from_value,
)
from .request_options import FunctionInvokeOptions

__all__ = [
    "ArrayBufferBody",
    "AsyncFunctionsClient",
    "BlobBody",
    "BytesData",
    "Failure",
    "FileBody",
    "FormData",
    "FormDataBody",
    "FunctionInvokeOptions",
    "FunctionRegion",
    "FunctionsClient",
    "FunctionsError",
    "FunctionsFetchError",
    "FunctionsHttpError",
    "FunctionsRelayError",
    "FunctionsResponse",
    "FunctionsValidationError",
    "HttpMethod",
    "InvokeBody",
    "JsonBody",
    "JsonData",
    "ResponseData",
    "ResponseDataAdapter",
    "StringBody",
    "Success",
    "TextData",
    "body_from_value",
]

__version__ = "0.1.0"
