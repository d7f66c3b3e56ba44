from __future__ import annotations

from enum import Enum
from typing import ClassVar


class ErrorKind(Enum):
    EMPTY_INPUT = "empty_input"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    INVALID_REGION_CHAR = "invalid_region_char"
    UNKNOWN_REGION = "unknown_region"
    UNKNOWN_MANUFACTURER = "unknown_manufacturer"
    INVALID_WMI_FOR_COUNTRY = "invalid_wmi_for_country"
    INVALID_YEAR_CHAR = "invalid_year_char"
    NO_CHECKSUM_FOR_REGION = "no_checksum_for_region"
    PROVIDER_UNAVAILABLE = "provider_unavailable"
    PROVIDER_DATA_UNAVAILABLE = "provider_data_unavailable"
    FIELD_NOT_FOUND = "field_not_found"
    SESSION_CLOSED = "session_closed"
    INVALID_VIN_UPSTREAM = "invalid_vin_upstream"


class VinError(Exception):
    """
    Base of every error raised by vininfo.

    Subclasses pin `kind` and keep the offending values as attributes, so
    callers can branch on either the class or `err.kind`.
    """

    kind: ClassVar[ErrorKind]


class EmptyInput(VinError):
    kind = ErrorKind.EMPTY_INPUT

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"VIN input is blank: {text!r}")


class TooShort(VinError):
    kind = ErrorKind.TOO_SHORT

    def __init__(self, vin: str, required: int) -> None:
        self.vin = vin
        self.required = required
        self.actual = len(vin)
        super().__init__(
            f"VIN {vin!r} has {self.actual} characters, "
            f"at least {required} are needed"
        )


class TooLong(VinError):
    kind = ErrorKind.TOO_LONG

    def __init__(self, vin: str, limit: int) -> None:
        self.vin = vin
        self.limit = limit
        self.actual = len(vin)
        super().__init__(
            f"VIN {vin!r} has {self.actual} characters, "
            f"at most {limit} are allowed"
        )


class InvalidRegionChar(VinError):
    kind = ErrorKind.INVALID_REGION_CHAR

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(
            f"invalid region character {char!r}: expected one of "
            f"A-H, J-R, S-Z or 1-9"
        )


class UnknownRegion(VinError):
    kind = ErrorKind.UNKNOWN_REGION

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"no region named for code {code!r}")


class UnknownManufacturer(VinError):
    kind = ErrorKind.UNKNOWN_MANUFACTURER

    def __init__(self, wmi: str) -> None:
        self.wmi = wmi
        super().__init__(f"no manufacturer known for WMI {wmi!r}")


class InvalidWmiForCountry(VinError):
    kind = ErrorKind.INVALID_WMI_FOR_COUNTRY

    def __init__(self, wmi: str) -> None:
        self.wmi = wmi
        super().__init__(f"WMI {wmi!r} does not match any known country")


class InvalidYearChar(VinError):
    kind = ErrorKind.INVALID_YEAR_CHAR

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"invalid model year character {char!r}")


class NoChecksumForRegion(VinError):
    kind = ErrorKind.NO_CHECKSUM_FOR_REGION

    def __init__(self, region_code: str) -> None:
        self.region_code = region_code
        super().__init__(f"VINs from region {region_code} carry no check digit")


class ProviderUnavailable(VinError):
    kind = ErrorKind.PROVIDER_UNAVAILABLE

    def __init__(self, vin: str, reason: str) -> None:
        self.vin = vin
        self.reason = reason
        super().__init__(f"decode provider failed for {vin}: {reason}")

    def __reduce__(self):
        return type(self), (self.vin, self.reason), self.__dict__


class ProviderDataUnavailable(ProviderUnavailable):
    kind = ErrorKind.PROVIDER_DATA_UNAVAILABLE


class FieldNotFound(VinError):
    kind = ErrorKind.FIELD_NOT_FOUND

    def __init__(self, vin: str, field_id: str) -> None:
        self.vin = vin
        self.field_id = field_id
        super().__init__(f"decoded data for {vin} has no value for {field_id!r}")


class SessionClosed(VinError):
    kind = ErrorKind.SESSION_CLOSED

    def __init__(self, vin: str) -> None:
        self.vin = vin
        super().__init__(f"decode session for {vin} is already closed")


class InvalidVinUpstream(VinError):
    kind = ErrorKind.INVALID_VIN_UPSTREAM

    def __init__(self, vin: str, message: str) -> None:
        self.vin = vin
        self.message = message
        super().__init__(f"provider rejected {vin}: {message}")
