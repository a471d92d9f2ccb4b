import logging
from enum import Enum

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from vehicle_catalog.utils.response import error_response

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    FIELD_REQUIRED = "field_required"
    INVALID_FIELD_VALUE = "invalid_field_value"
    ID_ALREADY_EXISTS = "id_already_exists"
    REGISTRATION_ALREADY_EXISTS = "registration_already_exists"
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    INVALID_RANGE = "invalid_range"


class AppException(Exception):
    kind: ErrorKind | None = None

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def detail(self) -> dict | None:
        if self.kind is None:
            return None
        return {"kind": self.kind.value}


class FieldRequiredError(AppException):
    kind = ErrorKind.FIELD_REQUIRED

    def __init__(self, field: str):
        super().__init__(f"field required: {field}", status_code=400)
        self.field = field

    def detail(self) -> dict:
        return {"kind": self.kind.value, "field": self.field}


class InvalidFieldValueError(AppException):
    kind = ErrorKind.INVALID_FIELD_VALUE

    def __init__(self, field: str):
        super().__init__(f"field with invalid value: {field}", status_code=400)
        self.field = field

    def detail(self) -> dict:
        return {"kind": self.kind.value, "field": self.field}


class IdAlreadyExistsError(AppException):
    """Raised by the store when the vehicle id is taken."""

    kind = ErrorKind.ID_ALREADY_EXISTS

    def __init__(self, vehicle_id: int):
        super().__init__(f"vehicle id already exists: {vehicle_id}", status_code=409)
        self.vehicle_id = vehicle_id


class RegistrationAlreadyExistsError(AppException):
    """Raised by the store when the registration is taken."""

    kind = ErrorKind.REGISTRATION_ALREADY_EXISTS

    def __init__(self, registration: str):
        super().__init__(f"vehicle registration already exists: {registration}", status_code=409)
        self.registration = registration


class AlreadyExistsError(AppException):
    kind = ErrorKind.ALREADY_EXISTS

    def __init__(self, reason: str):
        super().__init__(f"vehicle already exists: {reason}", status_code=409)
        self.reason = reason

    def detail(self) -> dict:
        return {"kind": self.kind.value, "reason": self.reason}


class VehicleNotFoundError(AppException):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, vehicle_id: int):
        super().__init__(f"vehicle not found: {vehicle_id}", status_code=404)
        self.vehicle_id = vehicle_id


class VehiclesNotFoundError(AppException):
    """No vehicle matched a filtered query. An expected outcome, not a fault."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "vehicles not found"):
        super().__init__(message, status_code=404)


class InvalidRangeError(AppException):
    kind = ErrorKind.INVALID_RANGE

    def __init__(self, field: str):
        super().__init__(f"invalid range: min {field} greater than max {field}", status_code=400)
        self.field = field

    def detail(self) -> dict:
        return {"kind": self.kind.value, "field": self.field}


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        logger.info("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(exc.message, data=exc.detail()),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Rejected inputs are left out; they may not be JSON compliant (NaN)
        errors = [{"loc": list(err["loc"]), "msg": err["msg"]} for err in exc.errors()]
        return JSONResponse(
            status_code=422,
            content=error_response("Request validation failed", data={"errors": errors}),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_response("Internal server error"),
        )
