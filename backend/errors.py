"""Digital Build error handling.

Exceptions raised by services and turned into ``{"error": ...}`` JSON
responses by the handlers registered in ``main.py``.
"""

from typing import Optional, Dict, Any


class DigitalBuildError(Exception):
    """Base exception carrying the HTTP status the API should answer with.

    Attributes:
        status_code: HTTP status for the response
        message: Human-readable error message shown to the user
        details: Additional error context (logged, not returned)
    """

    status_code = 500

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to the API error payload."""
        return {"error": self.message}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(status_code={self.status_code!r}, message={self.message!r})"


class ValidationError(DigitalBuildError):
    """Request rejected locally, before any remote call."""

    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details={"field": field} if field else None)
        self.field = field


class GatewayError(DigitalBuildError):
    """AI gateway call failed or returned something unusable."""

    RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."
    PAYMENT_MESSAGE = "Payment required. Please add credits to your workspace."

    @classmethod
    def from_status(cls, status_code: int, detail: str = "") -> "GatewayError":
        """Map an upstream HTTP status to the status and message we expose."""
        if status_code == 429:
            return cls(cls.RATE_LIMIT_MESSAGE, 429, {"upstream": detail})
        if status_code == 402:
            return cls(cls.PAYMENT_MESSAGE, 402, {"upstream": detail})
        return cls(f"AI gateway error: {status_code}", 500, {"upstream": detail})
