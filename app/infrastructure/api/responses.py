"""Result envelope helpers shared by the location routers."""

from __future__ import annotations

from fastapi.responses import JSONResponse

from app.domain.value_objects.enums import ErrorKind
from app.domain.value_objects.result import Err

ERROR_STATUS: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 422,
    ErrorKind.GEOCODING: 422,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


def error_response(err: Err) -> JSONResponse:
    return JSONResponse(
        status_code=ERROR_STATUS[err.kind],
        content={"success": False, "error": err.error, "kind": err.kind.value},
    )


def success(**payload) -> dict:
    return {"success": True, **payload}
