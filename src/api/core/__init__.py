from .response import api_response, raiseExceptions
from .dependencies import (
    GetSession,
    requireImportAdmin,
)


__all__ = [
    "GetSession",
    "requireImportAdmin",
    "api_response",
    "raiseExceptions",
]
