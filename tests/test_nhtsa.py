from typing import Any

import pytest
from requests import ConnectionError, HTTPError, JSONDecodeError, ReadTimeout

import vininfo.providers.nhtsa as nhtsa
from vininfo import Vin
from vininfo.errors import ProviderUnavailable
from vininfo.providers.nhtsa import (
    CLEAN_DECODE_MESSAGE,
    NHTSA_TIMEOUT,
    NhtsaProvider,
    parse_decode_payload,
)
from vininfo.util import to_snake_case

TEST_VIN = "WBA3A5G59DNP26082"

PAYLOAD = {
    "Count": 136,
    "Message": "Results returned successfully",
    "SearchCriteria": f"VIN:{TEST_VIN}",
    "Results": [
        {
            "Make": "BMW",
            "Model": "328i",
            "ModelYear": "2013",
            "VehicleType": "PASSENGER CAR",
            "BodyClass": "Sedan/Saloon",
            "DisplacementL": "2.0",
            "Trim": "",
            "ErrorCode": "0",
            "ErrorText": CLEAN_DECODE_MESSAGE,
        }
    ],
}


class FakeResponse:
    def __init__(
        self,
        payload: Any = None,
        status: int = 200,
        bad_json: Exception | None = None,
    ) -> None:
        self.payload = payload
        self.status = status
        self.bad_json = bad_json

    def raise_for_status(self) -> None:
        if self.status >= 400:
            raise HTTPError(f"{self.status} Server Error")

    def json(self) -> Any:
        if self.bad_json is not None:
            raise self.bad_json
        return self.payload


class FakeSession:
    def __init__(
        self, resp: FakeResponse | None = None, exc: Exception | None = None
    ) -> None:
        self.resp = resp or FakeResponse(PAYLOAD)
        self.exc = exc
        self.requests: list[tuple[str, float]] = []
        self.closed = False

    def get(self, url: str, timeout: float) -> FakeResponse:
        self.requests.append((url, timeout))
        if self.exc is not None:
            raise self.exc
        return self.resp

    def close(self) -> None:
        self.closed = True


@pytest.mark.parametrize(
    "key, snake",
    [
        ("Make", "make"),
        ("BodyClass", "body_class"),
        ("VehicleType", "vehicle_type"),
        ("ErrorText", "error_text"),
        ("ModelYear", "model_year"),
        ("DisplacementL", "displacement_L"),
        ("ABS", "ABS"),
    ],
)
def test_to_snake_case(key, snake):
    assert to_snake_case(key) == snake


def test_decode():
    sess = FakeSession()
    provider = NhtsaProvider(sess)  # type: ignore

    res = provider.decode(TEST_VIN)

    assert res.vin_number == TEST_VIN
    assert res.value_of("make") == "BMW"
    assert res.value_of("body_class") == "Sedan/Saloon"
    assert res.value_of("vehicle_type") == "PASSENGER CAR"
    assert res.value_of("error_text") == CLEAN_DECODE_MESSAGE
    assert res.clean_message == CLEAN_DECODE_MESSAGE
    assert res.value_of("trim") is None

    [(url, timeout)] = sess.requests
    assert TEST_VIN in url
    assert url.endswith("format=json")
    assert timeout == NHTSA_TIMEOUT


def test_custom_timeout_and_url():
    sess = FakeSession()
    provider = NhtsaProvider(
        sess,  # type: ignore
        timeout=5,
        base_url="http://localhost/decode/{}?fmt={}",
    )
    provider.decode(TEST_VIN)

    assert sess.requests == [(f"http://localhost/decode/{TEST_VIN}?fmt=json", 5)]


@pytest.mark.parametrize(
    "sess",
    [
        FakeSession(exc=ConnectionError("connection refused")),
        FakeSession(exc=ReadTimeout("read timed out")),
        FakeSession(FakeResponse(status=503)),
        FakeSession(FakeResponse({"Results": []})),
        FakeSession(FakeResponse({"Message": "nope"})),
        FakeSession(FakeResponse(None)),
    ],
)
def test_decode_failures(sess):
    provider = NhtsaProvider(sess)

    with pytest.raises(ProviderUnavailable) as ei:
        provider.decode(TEST_VIN)
    assert ei.value.vin == TEST_VIN
    assert ei.value.__cause__ is not None


@pytest.mark.parametrize(
    "exc",
    [
        JSONDecodeError("Expecting value", "<html>", 0),
        ValueError("Expecting value: line 1 column 1 (char 0)"),
    ],
)
def test_decode_bad_json(exc):
    provider = NhtsaProvider(FakeSession(FakeResponse(bad_json=exc)))

    with pytest.raises(ProviderUnavailable) as ei:
        provider.decode(TEST_VIN)
    assert ei.value.reason.startswith("bad json:")
    assert ei.value.__cause__ is exc


def test_http_error_reason():
    provider = NhtsaProvider(FakeSession(FakeResponse(status=503)))

    with pytest.raises(ProviderUnavailable) as ei:
        provider.decode(TEST_VIN)
    assert ei.value.reason.startswith("request failed:")


def test_vin_is_escaped_in_url():
    sess = FakeSession()
    provider = NhtsaProvider(sess)  # type: ignore

    provider.decode("1HG#CM/826?33A004352")

    [(url, _)] = sess.requests
    assert url == (
        "https://vpic.nhtsa.dot.gov/api/vehicles/DecodeVinValues/"
        "1HG%23CM%2F826%3F33A004352?format=json"
    )


def test_parse_keeps_order():
    res = parse_decode_payload(TEST_VIN, PAYLOAD)
    assert [f.name for f in res.fields] == list(PAYLOAD["Results"][0])


def test_borrowed_session_not_closed():
    sess = FakeSession()
    provider = NhtsaProvider(sess)  # type: ignore

    provider.decode(TEST_VIN)
    provider.close()

    assert not sess.closed


def test_owned_session_created_lazily_and_closed(monkeypatch):
    created: list[FakeSession] = []

    def _mk_session() -> FakeSession:
        created.append(FakeSession())
        return created[-1]

    monkeypatch.setattr(nhtsa, "Session", _mk_session)

    provider = NhtsaProvider()
    assert created == []

    provider.decode(TEST_VIN)
    provider.decode(TEST_VIN)
    assert len(created) == 1

    provider.close()
    assert created[0].closed


def test_vin_through_nhtsa():
    sess = FakeSession()

    with Vin.from_number(TEST_VIN, provider=NhtsaProvider(sess)) as vin:  # type: ignore
        assert vin.make_from_provider() == "BMW"
        assert vin.model_from_provider() == "328i"
        assert vin.is_valid_upstream().is_ok

    assert len(sess.requests) == 1
