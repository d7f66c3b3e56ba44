from __future__ import annotations

REGION_BY_CODE: dict[str, str] = {
    "AF": "Africa",
    "AS": "Asia",
    "EU": "Europe",
    "NA": "North America",
    "OC": "Oceania",
    "SA": "South America",
}

# first VIN character ranges, checked in order
REGION_RANGES: tuple[tuple[str, str, str], ...] = (
    ("A", "H", "AF"),
    ("J", "R", "AS"),
    ("S", "Z", "EU"),
    ("1", "5", "NA"),
    ("6", "7", "OC"),
    ("8", "9", "SA"),
)


def region_code_for(char: str) -> str | None:
    char = char.upper()
    if char in "IOQ":
        return None
    for lo, hi, code in REGION_RANGES:
        if lo <= char <= hi:
            return code
    return None
