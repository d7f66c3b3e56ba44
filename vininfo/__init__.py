from logging import getLogger

LOG = getLogger("vininfo")

from vininfo.errors import ErrorKind, VinError  # noqa: E402
from vininfo.session import DecodeSession  # noqa: E402
from vininfo.vin import Vin  # noqa: E402

__version__ = "1.0.0"

__all__ = ["LOG", "DecodeSession", "ErrorKind", "Vin", "VinError"]
