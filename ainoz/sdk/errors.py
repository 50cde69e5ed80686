# error taxonomy for the SDK
# every error carries kind + code so callers can branch without matching messages:
#   except AinozError as e:
#       if e.kind is ErrorKind.NETWORK: ...

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NETWORK = "network"


class AinozError(Exception):
    kind: Optional[ErrorKind] = None
    default_code = "AINOZ_ERROR"

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class ValidationError(AinozError):
    """Bad request parameters or client configuration. Raised before any I/O."""

    kind = ErrorKind.VALIDATION
    default_code = "VALIDATION_ERROR"


class NetworkError(AinozError):
    """The HTTP exchange failed: bad status, malformed body, timeout or transport error."""

    kind = ErrorKind.NETWORK
    default_code = "NETWORK_ERROR"
