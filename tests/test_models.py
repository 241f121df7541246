from __future__ import annotations

import pydantic
import pytest

from functions_sdk import (
    BlobBody,
    BytesData,
    Failure,
    FormDataBody,
    FunctionRegion,
    FunctionsFetchError,
    FunctionsValidationError,
    HttpMethod,
    JsonBody,
    JsonData,
    ResponseDataAdapter,
    StringBody,
    Success,
    TextData,
    body_from_value,
)


def test_region_string_form_is_canonical() -> None:
    assert str(FunctionRegion.US_EAST_1) == "us-east-1"
    assert str(FunctionRegion.AP_SOUTHEAST_2) == "ap-southeast-2"
    assert str(FunctionRegion.ANY) == "any"
    assert FunctionRegion("eu-central-1") is FunctionRegion.EU_CENTRAL_1


def test_every_region_value_is_lowercase_hyphenated() -> None:
    for region in FunctionRegion:
        assert region.value == region.name.lower().replace("_", "-")


def test_http_method_values() -> None:
    assert [str(method) for method in HttpMethod] == ["GET", "POST", "PUT", "PATCH", "DELETE"]


def test_body_from_value_picks_variant() -> None:
    assert body_from_value(b"\x00\x01") == BlobBody(data=b"\x00\x01")
    assert body_from_value(bytearray(b"ab")) == BlobBody(data=b"ab")
    assert body_from_value("text") == StringBody(data="text")
    assert body_from_value({"a": [1, 2]}) == JsonBody(data={"a": [1, 2]})
    form = FormDataBody(data={"k": "v"})
    assert body_from_value(form) is form


def test_body_from_value_rejects_unknown_types() -> None:
    with pytest.raises(FunctionsValidationError, match="Unsupported body type"):
        body_from_value(42)


def test_bodies_are_immutable() -> None:
    body = StringBody(data="x")
    with pytest.raises(pydantic.ValidationError):
        body.data = "y"


def test_form_data_body_requires_string_values() -> None:
    with pytest.raises(pydantic.ValidationError):
        FormDataBody(data={"count": 3})


def test_response_data_adapter_selects_variant_by_kind() -> None:
    assert ResponseDataAdapter.validate_python({"kind": "json", "data": {"a": 1}}) == JsonData(data={"a": 1})
    assert ResponseDataAdapter.validate_python({"kind": "text", "data": "hi"}) == TextData(data="hi")


def test_bytes_payload_serializes_as_base64() -> None:
    payload = BytesData(data=bytes([1, 2, 3, 4, 5]))

    dumped = ResponseDataAdapter.dump_json(payload)

    assert dumped == b'{"kind":"bytes","data":"AQIDBAU="}'
    assert ResponseDataAdapter.validate_json(dumped) == payload


def test_success_and_failure_outcomes() -> None:
    success = Success(data=TextData(data="ok"))
    assert success.ok
    assert success.unwrap() == TextData(data="ok")

    error = FunctionsFetchError("boom")
    failure = Failure(error=error)
    assert not failure.ok
    with pytest.raises(FunctionsFetchError) as excinfo:
        failure.unwrap()
    assert excinfo.value is error
    assert str(error) == "FetchError: boom"
