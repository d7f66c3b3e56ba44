from __future__ import annotations

import copy
import json
from dataclasses import dataclass
from threading import Lock
from types import TracebackType
from typing import Generic, NoReturn, TypeVar, Union

from vininfo import LOG
from vininfo.errors import (
    FieldNotFound,
    InvalidVinUpstream,
    ProviderDataUnavailable,
    ProviderUnavailable,
    SessionClosed,
)
from vininfo.providers import (
    BODY_CLASS,
    ERROR_TEXT,
    MAKE,
    MODEL,
    VEHICLE_TYPE,
    DecodeProvider,
    DecodeResult,
)
from vininfo.util import is_blank

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def is_ok(self) -> bool:
        return False


ValidationResult = Union[Ok[str], Err[InvalidVinUpstream]]


class DecodeSession:
    """
    Single-fetch cache in front of a decode provider, for one VIN.

    The first `fetch` calls the provider; its outcome, success or failure, is
    kept and served to every later call until the session is closed. Fetches
    are serialized by a lock so overlapping callers share one request.
    """

    def __init__(self, vin_number: str, provider: DecodeProvider) -> None:
        self.vin_number = vin_number
        self.provider = provider
        self.closed = False
        self._result: DecodeResult | None = None
        self._failure: ProviderUnavailable | None = None
        self._lock = Lock()

    @property
    def is_cached(self) -> bool:
        return self._result is not None or self._failure is not None

    def fetch(self) -> DecodeResult:
        with self._lock:
            if self._result is not None:
                return self._result
            if self._failure is not None:
                self._raise_failure()
            if self.closed:
                raise SessionClosed(self.vin_number)

            try:
                self._result = self.provider.decode(self.vin_number)
            except ProviderUnavailable as e:
                self._failure = e
            except Exception as e:
                self._failure = ProviderUnavailable(self.vin_number, repr(e))
                self._failure.__cause__ = e

            if self._failure is not None:
                LOG.warning(f"decode of {self.vin_number} failed: {self._failure}")
                self._raise_failure()

            return self._result

    def _raise_failure(self) -> NoReturn:
        # fresh copy per raise; the memo itself never collects caller frames
        failure = self._failure
        assert failure is not None
        raise copy.copy(failure) from failure.__cause__

    def get_field(self, field_id: str) -> str:
        value = self.fetch().value_of(field_id)
        if value is None:
            raise FieldNotFound(self.vin_number, field_id)
        return value

    def make(self) -> str:
        return self.get_field(MAKE)

    def model(self) -> str:
        return self.get_field(MODEL)

    def vehicle_type(self) -> str:
        return self.get_field(VEHICLE_TYPE)

    def body_class(self) -> str:
        return self.get_field(BODY_CLASS)

    def as_info_map(self) -> dict[str, str]:
        try:
            result = self.fetch()
        except ProviderUnavailable as e:
            raise ProviderDataUnavailable(self.vin_number, e.reason) from e
        return result.as_dict()

    def as_json(self) -> str:
        return json.dumps(self.as_info_map())

    def is_valid_upstream(self) -> ValidationResult:
        """
        Interprets the provider's error text for this VIN.

        Returns:
            Ok(vin_number) if the provider reports nothing or a clean decode,
            otherwise Err(InvalidVinUpstream) carrying the provider's message.
        """
        result = self.fetch()
        message = result.value_of(ERROR_TEXT)
        if is_blank(message) or message == result.clean_message:
            return Ok(self.vin_number)
        return Err(InvalidVinUpstream(self.vin_number, message))

    def close(self) -> None:
        with self._lock:
            if self.closed:
                return
            self.closed = True
            self._result = None
            self._failure = None
        try:
            self.provider.close()
        except Exception:
            LOG.exception(f"failed to release provider for {self.vin_number}")

    def __enter__(self) -> DecodeSession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
