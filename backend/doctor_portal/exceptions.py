from fastapi.responses import JSONResponse


class PortalError(Exception):
    """Base for errors rendered to clients as ``{"message": ...}``."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: str = None, status_code: int = None):
        self.message = message or self.message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class UnauthenticatedError(PortalError):
    status_code = 401
    message = "UnAuthorized access"


class InvalidTokenError(PortalError):
    status_code = 403
    message = "Forbidden access"


class ForbiddenError(PortalError):
    status_code = 403
    message = "forbidden"


class BadRequestError(PortalError):
    status_code = 400
    message = "Bad request"


def internal_error_response() -> JSONResponse:
    """Generic 500 for failures nothing else mapped."""
    return JSONResponse(status_code=PortalError.status_code, content={"message": PortalError.message})
