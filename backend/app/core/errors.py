"""
Error taxonomy.

Every error that can reach a client carries its HTTP status and a fixed,
user-safe message. Internal detail goes to the logs only.
"""

from __future__ import annotations

GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again later."
UNAVAILABLE_MESSAGE = "The recipe service is temporarily unavailable. Please try again later."
TIMEOUT_MESSAGE = "Request took too long. Please try again."
INGREDIENTS_REQUIRED_MESSAGE = "Please enter at least one ingredient."
INVALID_REQUEST_MESSAGE = "Invalid request. Please check your input and try again."
RATE_LIMIT_MESSAGE = "Too many requests. Please try again later."
NOT_FOUND_MESSAGE = "Not found"


class InsightChefError(Exception):
    """Base class for errors translated into an HTTP response."""

    status_code: int = 500
    public_message: str = GENERIC_ERROR_MESSAGE

    def __init__(self, detail: str = "", public_message: str | None = None):
        super().__init__(detail or self.public_message)
        self.detail = detail
        if public_message is not None:
            self.public_message = public_message


class InputValidationError(InsightChefError):
    status_code = 400
    public_message = INGREDIENTS_REQUIRED_MESSAGE


class UpstreamUnavailableError(InsightChefError):
    """Network failure, non-success status or undecodable model output."""

    status_code = 502
    public_message = UNAVAILABLE_MESSAGE


class ServiceNotConfiguredError(InsightChefError):
    status_code = 503
    public_message = UNAVAILABLE_MESSAGE


class UpstreamTimeoutError(InsightChefError):
    status_code = 504
    public_message = TIMEOUT_MESSAGE


class UnexpectedError(InsightChefError):
    status_code = 500
    public_message = GENERIC_ERROR_MESSAGE
