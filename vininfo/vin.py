from __future__ import annotations

import re
from dataclasses import dataclass, field
from threading import Lock
from types import TracebackType

from vininfo.checksum import CHECK_DIGIT_IX, VIN_LENGTH
from vininfo.checksum import calculated_checksum as compute_checksum
from vininfo.data import (
    COUNTRIES,
    MANUFACTURERS,
    REGION_BY_CODE,
    YEARS,
    region_code_for,
)
from vininfo.errors import (
    EmptyInput,
    InvalidRegionChar,
    InvalidWmiForCountry,
    InvalidYearChar,
    NoChecksumForRegion,
    TooShort,
    UnknownManufacturer,
    UnknownRegion,
    VinError,
)
from vininfo.providers import DecodeProvider
from vininfo.providers.nhtsa import NhtsaProvider
from vininfo.session import DecodeSession, ValidationResult

VALID_VIN_RE = re.compile(r"[A-Z0-9]{17}", re.ASCII)

NO_CHECKSUM_REGION = "EU"
CHECKSUM_EXEMPT_COUNTRY = "United Kingdom"


def normalize(text: str) -> str:
    return text.upper().replace("-", "")


@dataclass(frozen=True)
class Vin:
    """
    A normalized 17-character vehicle identification number.

    All structural accessors are pure and derived from `normalized`; those
    that need more characters than the VIN has raise `TooShort`. Provider
    lookups go through `decoder`, a `DecodeSession` created on first use
    and released by `close` or by leaving a `with` block.

    Example:
        with Vin.from_number("WBA3A5G59DNP26082") as vin:
            vin.year          # 2013
            vin.manufacturer  # 'BMW'
            vin.decoder.model()
    """

    raw: str = field(compare=False)
    normalized: str
    provider: DecodeProvider | None = field(
        default=None, repr=False, compare=False
    )
    _session: DecodeSession | None = field(
        default=None, init=False, repr=False, compare=False
    )
    _session_lock: Lock = field(
        default_factory=Lock, init=False, repr=False, compare=False
    )

    @classmethod
    def from_number(
        cls, text: str, provider: DecodeProvider | None = None
    ) -> Vin:
        if not text or not text.strip():
            raise EmptyInput(text)
        return cls(text, normalize(text), provider)

    @property
    def vin_number(self) -> str:
        return self.normalized

    def _require(self, n: int) -> None:
        if len(self.normalized) < n:
            raise TooShort(self.normalized, n)

    @property
    def wmi(self) -> str:
        self._require(3)
        return self.normalized[:3]

    @property
    def vds(self) -> str:
        self._require(9)
        return self.normalized[3:9]

    @property
    def vis(self) -> str:
        self._require(VIN_LENGTH)
        return self.normalized[9:VIN_LENGTH]

    @property
    def region_code(self) -> str:
        self._require(1)
        char = self.normalized[0]
        if (code := region_code_for(char)) is None:
            raise InvalidRegionChar(char)
        return code

    @property
    def region(self) -> str:
        code = self.region_code
        try:
            return REGION_BY_CODE[code]
        except KeyError:
            raise UnknownRegion(code) from None

    @property
    def country(self) -> str:
        wmi = self.wmi
        if (out := COUNTRIES.get(wmi, COUNTRIES.get(wmi[:2]))) is None:
            raise InvalidWmiForCountry(wmi)
        return out

    @property
    def manufacturer(self) -> str:
        wmi = self.wmi
        if not wmi.strip():
            raise TooShort(self.normalized, 3)
        if (out := MANUFACTURERS.get(wmi, MANUFACTURERS.get(wmi[:2]))) is None:
            raise UnknownManufacturer(wmi)
        return out

    @property
    def year_character(self) -> str:
        self._require(10)
        return self.normalized[9]

    @property
    def year(self) -> int:
        char = self.year_character
        try:
            return YEARS[char]
        except KeyError:
            raise InvalidYearChar(char) from None

    @property
    def checksum(self) -> str:
        if (code := self.region_code) == NO_CHECKSUM_REGION:
            raise NoChecksumForRegion(code)
        self._require(CHECK_DIGIT_IX + 1)
        return self.normalized[CHECK_DIGIT_IX]

    @property
    def calculated_checksum(self) -> str:
        return compute_checksum(self.normalized)

    @property
    def assembly_plant(self) -> str:
        self._require(11)
        return self.normalized[10]

    @property
    def serial_number(self) -> str:
        self._require(VIN_LENGTH)
        return self.normalized[12:VIN_LENGTH]

    @property
    def is_valid(self) -> bool:
        """
        Format and check digit test; never raises.

        EU-region VINs, and the historical United Kingdom carve-out, pass on
        format alone. Any lookup failure along the way means not valid.
        """
        if VALID_VIN_RE.fullmatch(self.normalized) is None:
            return False
        try:
            if self.region_code == NO_CHECKSUM_REGION:
                return True
            if self._is_checksum_exempt_country():
                return True
            return self.calculated_checksum == self.checksum
        except VinError:
            return False

    def _is_checksum_exempt_country(self) -> bool:
        # UK WMIs start with S, inside the EU region, so with the bundled
        # tables this only fires for a country table that maps UK elsewhere
        try:
            return self.country == CHECKSUM_EXEMPT_COUNTRY
        except VinError:
            return False

    # provider-backed lookups

    @property
    def decoder(self) -> DecodeSession:
        if self._session is None:
            with self._session_lock:
                if self._session is None:
                    provider = self.provider
                    if provider is None:
                        provider = NhtsaProvider()
                    session = DecodeSession(self.normalized, provider)
                    object.__setattr__(self, "_session", session)
        return self._session

    def make_from_provider(self) -> str:
        return self.decoder.make()

    def model_from_provider(self) -> str:
        return self.decoder.model()

    def vehicle_type_from_provider(self) -> str:
        return self.decoder.vehicle_type()

    def body_class_from_provider(self) -> str:
        return self.decoder.body_class()

    def is_valid_upstream(self) -> ValidationResult:
        return self.decoder.is_valid_upstream()

    def as_json(self) -> str:
        return self.decoder.as_json()

    def close(self) -> None:
        # only release a session that was actually opened
        with self._session_lock:
            session = self._session
        if session is not None:
            session.close()

    def __enter__(self) -> Vin:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __str__(self) -> str:
        try:
            return self.wmi + self.vds + self.vis
        except TooShort:
            return self.normalized
