from __future__ import annotations

# 30-year cycle; I, O, Q, U, Z and 0 are never used as year characters
YEAR_CHARS = "123456789ABCDEFGHJKLMNPRSTVWXY"
FIRST_YEAR = 2001

YEARS: dict[str, int] = {
    c: FIRST_YEAR + ix for ix, c in enumerate(YEAR_CHARS)
}
