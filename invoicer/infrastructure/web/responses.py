"""
Envelope rendering for use case results.
"""

from fastapi import status
from fastapi.responses import JSONResponse

from invoicer.application.use_cases.base_use_case import (
    UseCaseResult, UNAUTHORIZED, NOT_FOUND, VALIDATION_ERROR, DELIVERY_FAILED
)


ERROR_STATUS_CODES = {
    UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    NOT_FOUND: status.HTTP_404_NOT_FOUND,
    VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    DELIVERY_FAILED: status.HTTP_502_BAD_GATEWAY,
}


def status_code_for(result: UseCaseResult, success_status: int = status.HTTP_200_OK) -> int:
    if result.success:
        return success_status
    return ERROR_STATUS_CODES.get(result.error_code, status.HTTP_500_INTERNAL_SERVER_ERROR)


def envelope_response(result: UseCaseResult, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    """Render a use case result as ``{success, data|error}`` with a matching status code."""
    headers = None
    if result.error_code == UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}

    return JSONResponse(
        status_code=status_code_for(result, success_status),
        content=result.to_envelope(),
        headers=headers
    )
