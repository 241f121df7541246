"""Synchronous and asynchronous clients for invoking edge functions."""

from __future__ import annotations

import logging
from typing import Any, Mapping
from urllib.parse import quote

import httpx

from .exceptions import (
    FunctionsError,
    FunctionsFetchError,
    FunctionsHttpError,
    FunctionsRelayError,
    FunctionsValidationError,
)
from .models import (
    BINARY_BODIES,
    FORM_FIELDS_ADAPTER,
    BytesData,
    Failure,
    FormData,
    FormDataBody,
    FunctionRegion,
    FunctionsResponse,
    HttpMethod,
    JsonBody,
    JsonData,
    ResponseData,
    StringBody,
    Success,
    TextData,
    body_from_value,
)
from .request_options import FunctionInvokeOptions
from .security import sanitize_headers, validate_base_url, validate_function_name


logger = logging.getLogger(__name__)

RELAY_ERROR_HEADER = "x-relay-error"
REGION_HEADER = "x-region"
DEFAULT_MEDIA_TYPE = "text/plain"


def _normalize_headers(headers: Mapping[str, str] | None) -> dict[str, str]:
    if not headers:
        return {}
    clean: dict[str, str] = {}
    for key, value in headers.items():
        key = str(key)
        # last value wins across case variants of the same header
        for existing in [k for k in clean if k.lower() == key.lower()]:
            del clean[existing]
        clean[key] = str(value)
    return clean


def _coerce_method(method: HttpMethod | str | None) -> HttpMethod:
    if method is None:
        return HttpMethod.POST
    if isinstance(method, HttpMethod):
        return method
    try:
        return HttpMethod(str(method).upper())
    except ValueError:
        raise FunctionsValidationError(f"Unsupported HTTP method: {method}") from None


def _coerce_region(region: FunctionRegion | str) -> FunctionRegion:
    if isinstance(region, FunctionRegion):
        return region
    try:
        return FunctionRegion(str(region).lower())
    except ValueError:
        raise FunctionsValidationError(f"Unknown region: {region}") from None


def _media_type(response: httpx.Response) -> str:
    content_type = response.headers.get("content-type")
    if content_type is None:
        return DEFAULT_MEDIA_TYPE
    return content_type.split(";", 1)[0]


def _error_message(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


class _BaseFunctionsClient:
    default_follow_redirects = True

    def __init__(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        region: FunctionRegion | str | None = None,
    ) -> None:
        validate_base_url(url)
        self.url = url.rstrip("/")
        self.headers = _normalize_headers(headers)
        self.region = _coerce_region(region) if region is not None else FunctionRegion.ANY
        self._client_kwargs: dict[str, Any] = {
            "follow_redirects": self.default_follow_redirects,
        }

    def set_auth(self, token: str) -> None:
        """Authenticate every following invocation with a bearer token."""
        for key in list(self.headers):
            if key.lower() == "authorization":
                del self.headers[key]
        self.headers["Authorization"] = f"Bearer {token}"

    def _function_url(self, function_name: str) -> str:
        return f"{self.url}/{quote(validate_function_name(function_name), safe='')}"

    def _headers(self, options: FunctionInvokeOptions) -> httpx.Headers:
        merged = httpx.Headers(self.headers)
        if options.headers:
            merged.update(_normalize_headers(options.headers))
        region = _coerce_region(options.region) if options.region is not None else self.region
        if region is not FunctionRegion.ANY:
            merged[REGION_HEADER] = region.value
        return merged

    def _build_request(
        self,
        transport: httpx.Client | httpx.AsyncClient,
        function_name: str,
        options: FunctionInvokeOptions | None,
    ) -> httpx.Request:
        options = options or FunctionInvokeOptions()
        url = self._function_url(function_name)
        method = _coerce_method(options.method)
        body = body_from_value(options.body) if options.body is not None else None

        kwargs: dict[str, Any] = {}
        try:
            headers = self._headers(options)
            if isinstance(body, BINARY_BODIES):
                headers["Content-Type"] = "application/octet-stream"
                kwargs["content"] = body.data
            elif isinstance(body, StringBody):
                headers["Content-Type"] = "text/plain"
                kwargs["content"] = body.data.encode("utf-8")
            elif isinstance(body, FormDataBody):
                # multipart boundary header comes from the transport
                headers.pop("content-type", None)
                kwargs["files"] = [(key, (None, value)) for key, value in body.data.items()]
            elif isinstance(body, JsonBody):
                headers["Content-Type"] = "application/json"
                kwargs["json"] = body.data

            return transport.build_request(method.value, url, headers=headers, **kwargs)
        except (httpx.InvalidURL, TypeError, UnicodeEncodeError) as exc:
            raise FunctionsFetchError(_error_message(exc), cause=exc) from exc

    def _log_request(self, request: httpx.Request) -> None:
        logger.debug(
            "Invoking %s %s headers=%s",
            request.method,
            request.url,
            sanitize_headers(request.headers),
        )

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        headers = dict(response.headers)
        if response.headers.get(RELAY_ERROR_HEADER) == "true":
            logger.warning("Relay error invoking %s (status %s)", response.request.url, response.status_code)
            raise FunctionsRelayError(
                "Relay Error invoking the Edge Function",
                status_code=response.status_code,
                headers=headers,
            )
        if response.is_success:
            return
        message = f"{response.status_code} {response.reason_phrase}".strip()
        logger.debug("Function %s answered %s", response.request.url, message)
        raise FunctionsHttpError(
            message,
            status_code=response.status_code,
            headers=headers,
            body=response.text or None,
        )

    @staticmethod
    def _decode_response(response: httpx.Response) -> ResponseData:
        media_type = _media_type(response)
        logger.debug("Decoding %s response body (%d bytes)", media_type, len(response.content))
        try:
            if media_type == "application/json":
                return JsonData(data=response.json())
            if media_type == "application/octet-stream":
                return BytesData(data=response.content)
            if media_type == "text/event-stream":
                return TextData(data=response.text)
            if media_type == "multipart/form-data":
                # the functions runtime answers form data as a flat JSON object
                return FormData(data=FORM_FIELDS_ADAPTER.validate_json(response.content))
            return TextData(data=response.text)
        except ValueError as exc:
            raise FunctionsFetchError(
                _error_message(exc),
                status_code=response.status_code,
                headers=response.headers,
                cause=exc,
            ) from exc

    def _handle_response(self, response: httpx.Response) -> Success:
        self._raise_for_status(response)
        data = self._decode_response(response)
        return Success(data=data, status_code=response.status_code, headers=dict(response.headers))


class FunctionsClient(_BaseFunctionsClient):
    """Synchronous client."""

    def __init__(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        region: FunctionRegion | str | None = None,
        *,
        httpx_client: httpx.Client | None = None,
    ) -> None:
        super().__init__(url, headers=headers, region=region)
        self._owns_httpx = httpx_client is None
        self._httpx = httpx_client or httpx.Client(**self._client_kwargs)

    def __enter__(self) -> "FunctionsClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_httpx:
            self._httpx.close()

    def _send(self, function_name: str, options: FunctionInvokeOptions | None) -> Success:
        request = self._build_request(self._httpx, function_name, options)
        self._log_request(request)
        try:
            response = self._httpx.send(request)
        except httpx.HTTPError as exc:
            raise FunctionsFetchError(_error_message(exc), cause=exc) from exc
        return self._handle_response(response)

    def invoke(self, function_name: str, options: FunctionInvokeOptions | None = None) -> FunctionsResponse:
        """Invoke ``function_name`` and return a ``Success`` or ``Failure``.

        Fetch, HTTP and relay errors come back wrapped in ``Failure``;
        invalid arguments raise ``FunctionsValidationError``.
        """
        try:
            return self._send(function_name, options)
        except FunctionsValidationError:
            raise
        except FunctionsError as exc:
            return Failure(error=exc)

    def invoke_or_raise(self, function_name: str, options: FunctionInvokeOptions | None = None) -> ResponseData:
        return self._send(function_name, options).data


class AsyncFunctionsClient(_BaseFunctionsClient):
    """Asynchronous client."""

    def __init__(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        region: FunctionRegion | str | None = None,
        *,
        httpx_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(url, headers=headers, region=region)
        self._owns_httpx = httpx_client is None
        self._httpx = httpx_client or httpx.AsyncClient(**self._client_kwargs)

    async def __aenter__(self) -> "AsyncFunctionsClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_httpx:
            await self._httpx.aclose()

    async def _send(self, function_name: str, options: FunctionInvokeOptions | None) -> Success:
        request = self._build_request(self._httpx, function_name, options)
        self._log_request(request)
        try:
            response = await self._httpx.send(request)
        except httpx.HTTPError as exc:
            raise FunctionsFetchError(_error_message(exc), cause=exc) from exc
        return self._handle_response(response)

    async def invoke(self, function_name: str, options: FunctionInvokeOptions | None = None) -> FunctionsResponse:
        try:
            return await self._send(function_name, options)
        except FunctionsValidationError:
            raise
        except FunctionsError as exc:
            return Failure(error=exc)

    async def invoke_or_raise(
        self,
        function_name: str,
        options: FunctionInvokeOptions | None = None,
    ) -> ResponseData:
        return (await self._send(function_name, options)).data
