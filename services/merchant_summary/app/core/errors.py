import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from services.response_formatter import error_response

logger = logging.getLogger(__name__)

# code -> (http status, message)
ERROR_CODES = {
    "E001": (400, "Invalid request body"),
    "E002": (400, "Merchant IDs are required"),
    "E003": (500, "Failed to calculate daily total"),
    "E004": (500, "Failed to calculate weekly total"),
    "E005": (500, "Failed to calculate monthly total"),
}

# window -> error code raised when its aggregation fails
WINDOW_ERROR_CODES = {
    "daily": "E003",
    "weekly": "E004",
    "monthly": "E005",
}


class SummaryError(Exception):
    """Request-level failure rendered as an error envelope."""

    def __init__(self, code: str):
        status_code, message = ERROR_CODES[code]
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code


class AggregationError(Exception):
    """A window's aggregation was aborted by a store or decode failure."""

    def __init__(self, window: str, key: str, reason: str):
        super().__init__(f"{window} aggregation failed at {key}: {reason}")
        self.window = window
        self.key = key


def summary_error_handler(request: Request, exc: SummaryError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(exc.code, exc.message).model_dump(),
    )


def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected request body on %s: %s", request.url.path, exc.errors())
    status_code, message = ERROR_CODES["E001"]
    return JSONResponse(
        status_code=status_code,
        content=error_response("E001", message).model_dump(),
    )
