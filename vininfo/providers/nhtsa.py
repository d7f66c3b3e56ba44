from __future__ import annotations

from typing import Any
from urllib.parse import quote

from requests import RequestException, Session

from vininfo import LOG
from vininfo.errors import ProviderUnavailable
from vininfo.providers import DecodedField, DecodeResult
from vininfo.util import to_snake_case

NHTSA_VIN_DECODE_URL = (
    "https://vpic.nhtsa.dot.gov/api/vehicles/DecodeVinValues/{}?format={}"
)
NHTSA_TIMEOUT = 30

# vPIC's ErrorText when nothing is wrong with the VIN
CLEAN_DECODE_MESSAGE = (
    "0 - VIN decoded clean. Check Digit (9th position) is correct"
)


class NhtsaProvider:
    """
    Decodes VINs through the NHTSA vPIC `DecodeVinValues` endpoint.

    The http session is created on first use unless one is passed in; only
    a session created here is closed by `close`.
    """

    def __init__(
        self,
        session: Session | None = None,
        *,
        timeout: float = NHTSA_TIMEOUT,
        base_url: str = NHTSA_VIN_DECODE_URL,
    ) -> None:
        self.timeout = timeout
        self.base_url = base_url
        self._session = session
        self._owns_session = session is None

    @property
    def session(self) -> Session:
        if self._session is None:
            self._session = Session()
        return self._session

    def decode(self, vin_number: str) -> DecodeResult:
        url = self.base_url.format(quote(vin_number, safe=""), "json")
        LOG.debug(f"requesting vPIC decode: {url}")

        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except RequestException as e:
            raise ProviderUnavailable(vin_number, f"request failed: {e}") from e

        # requests.JSONDecodeError is a ValueError too
        try:
            payload = resp.json()
        except ValueError as e:
            raise ProviderUnavailable(vin_number, f"bad json: {e}") from e

        try:
            return parse_decode_payload(vin_number, payload)
        except (KeyError, IndexError, TypeError, AttributeError) as e:
            raise ProviderUnavailable(
                vin_number, f"unexpected payload shape: {e!r}"
            ) from e

    def close(self) -> None:
        if self._owns_session and self._session is not None:
            self._session.close()
        self._session = None


def parse_decode_payload(
    vin_number: str, payload: dict[str, Any]
) -> DecodeResult:
    """
    Flattens a `DecodeVinValues` response into decoded fields.

    Args:
        vin_number: the VIN that was requested
        payload: parsed json body, expected to look like
            {"Results": [{"Make": "BMW", "BodyClass": "Sedan", ...}], ...}

    Returns:
        one DecodedField per key of the first result, in response order
    """
    row = payload["Results"][0]
    return DecodeResult.from_fields(
        vin_number,
        (
            DecodedField(
                to_snake_case(k), k, None if v is None else str(v)
            )
            for k, v in row.items()
        ),
        CLEAN_DECODE_MESSAGE,
    )
