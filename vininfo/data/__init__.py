from .countries import COUNTRIES
from .manufacturers import MANUFACTURERS
from .regions import REGION_BY_CODE, region_code_for
from .years import YEARS

__all__ = [
    "COUNTRIES",
    "MANUFACTURERS",
    "REGION_BY_CODE",
    "YEARS",
    "region_code_for",
]
