"""Error models"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel
import uuid


class ErrorCode(str, Enum):
    """Error codes surfaced in API error payloads"""
    INVALID_REQUEST = "INVALID_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    NO_HTML_FILE = "NO_HTML_FILE"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    GENERATION_FAILED = "GENERATION_FAILED"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    UPDATE_FAILED = "UPDATE_FAILED"
    DEPLOYMENT_FAILED = "DEPLOYMENT_FAILED"


class ErrorResponse(BaseModel):
    """JSON body returned for every handled error"""
    error: str
    code: str
    error_id: str
    details: Optional[str] = None
    hint: Optional[str] = None
    retryable: bool = False


class ApplicationError(Exception):
    """Application error carrying an error code and optional upstream details"""
    def __init__(self, code: ErrorCode, message: str, retryable: bool = False, hint: Optional[str] = None,
                 details: Optional[str] = None, status_code: Optional[int] = None):
        self.error_id = str(uuid.uuid4())
        self.code = code
        self.message = message
        self.retryable = retryable
        self.hint = hint
        self.details = details
        # Upstream status to pass through instead of the code mapping
        self.status_code = status_code
        super().__init__(self.message)

    def model_dump(self):
        """Return dict representation for API responses"""
        return ErrorResponse(
            error=self.message,
            code=self.code.value,
            error_id=self.error_id,
            details=self.details,
            hint=self.hint,
            retryable=self.retryable,
        ).model_dump()

    @property
    def http_status(self) -> int:
        """Map error code to HTTP status"""
        if self.status_code:
            return self.status_code
        mapping = {
            ErrorCode.INVALID_REQUEST: 400,
            ErrorCode.NO_HTML_FILE: 400,
            ErrorCode.NOT_FOUND: 404,
            ErrorCode.CONFIGURATION_ERROR: 500,
            ErrorCode.GENERATION_FAILED: 500,
            ErrorCode.VALIDATION_FAILED: 500,
            ErrorCode.UPDATE_FAILED: 500,
            ErrorCode.DEPLOYMENT_FAILED: 500,
        }
        return mapping.get(self.code, 500)
