from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, NamedTuple, Protocol

from vininfo.util import is_blank, to_snake_case

MAKE = "make"
MODEL = "model"
VEHICLE_TYPE = "vehicle_type"
BODY_CLASS = "body_class"
ERROR_TEXT = "error_text"


class DecodedField(NamedTuple):
    field_id: str
    name: str
    value: str | None


@dataclass(frozen=True)
class DecodeResult:
    vin_number: str
    fields: tuple[DecodedField, ...] = field(default_factory=tuple)
    # error_text value this provider uses to report a clean decode
    clean_message: str | None = None

    @classmethod
    def from_fields(
        cls,
        vin_number: str,
        fields: Iterable[DecodedField],
        clean_message: str | None = None,
    ) -> DecodeResult:
        return cls(vin_number, tuple(fields), clean_message)

    def value_of(self, field_id: str) -> str | None:
        """
        Returns the stripped value for `field_id`, None if absent or blank.
        """
        for f in self.fields:
            if f.field_id == field_id:
                return None if is_blank(f.value) else f.value.strip()
        return None

    def as_dict(self) -> dict[str, str]:
        return {
            f.name: f.value.strip()
            for f in self.fields
            if not is_blank(f.name) and not is_blank(f.value)
        }


class DecodeProvider(Protocol):
    def decode(self, vin_number: str) -> DecodeResult:
        ...

    def close(self) -> None:
        ...


class StaticProvider:
    """
    Answers every decode from a fixed {name: value} mapping.

    Field ids are derived from names the same way the NHTSA provider does,
    so {"BodyClass": "Sedan"} is reachable as `body_class`.
    """

    def __init__(
        self,
        values: Mapping[str, str | None],
        clean_message: str | None = None,
    ) -> None:
        self.values = dict(values)
        self.clean_message = clean_message
        self.calls = 0
        self.closed = False

    def decode(self, vin_number: str) -> DecodeResult:
        self.calls += 1
        return DecodeResult.from_fields(
            vin_number,
            (
                DecodedField(to_snake_case(k), k, v)
                for k, v in self.values.items()
            ),
            self.clean_message,
        )

    def close(self) -> None:
        self.closed = True
