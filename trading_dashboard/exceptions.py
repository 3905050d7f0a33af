# trading_dashboard/exceptions.py - Custom exceptions for the trading dashboard
"""
Custom exception classes for the trading dashboard.
Separates chart lifecycle misuse from data-fetch failures.
"""

from typing import Optional, Dict, Any
from datetime import datetime, timezone


class DashboardError(Exception):
    """
    [CLASS SUMMARY]
    Purpose: Base exception class for all dashboard errors
    Usage: Base class for inheritance, rarely raised directly
    Attributes:
        - message: Error description
        - details: Additional context dictionary
        - timestamp: When the error occurred (UTC)
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        [FUNCTION SUMMARY]
        Purpose: Initialize base exception with message and optional details
        Parameters:
            - message (str): Human-readable error description
            - details (dict, optional): Additional context about the error
        Example: DashboardError("Chart not mounted", {"state": "unmounted"})
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc)

    def __str__(self) -> str:
        """Format error message with details if available"""
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class LifecycleError(DashboardError):
    """
    [CLASS SUMMARY]
    Purpose: Raised when chart lifecycle calls are made out of order
    Usage: Signals a caller bug, never recovered from by the chart itself
    Common scenarios:
        - mount() called on an already mounted chart
        - set_data() or resize() called before mount()
    """


class SurfaceUnavailable(DashboardError):
    """
    [CLASS SUMMARY]
    Purpose: Raised when a chart surface cannot be bound to its container
    Usage: Reported to the caller; the chart stays unmounted
    Common scenarios:
        - Container is None or its Qt object was already deleted
        - Container already hosts another chart surface
        - Surface construction failed part way
    """


class DashboardAPIError(DashboardError):
    """
    [CLASS SUMMARY]
    Purpose: Raised when the brokerage proxy returns an error response
    Usage: Caught at the REST client boundary and turned into a signal
    Common scenarios:
        - 401/403: Missing or rejected brokerage credentials
        - 404: Unknown symbol
        - 5xx: Proxy or upstream failure
    """

    def __init__(self, message: str, status_code: Optional[int] = None,
                 response_body: Optional[str] = None, **kwargs):
        """
        [FUNCTION SUMMARY]
        Purpose: Initialize API error with HTTP details
        Parameters:
            - message (str): Error description
            - status_code (int, optional): HTTP status code
            - response_body (str, optional): Raw API response
            - **kwargs: Additional details
        Example: DashboardAPIError("HTTP error! status: 500", status_code=500)
        """
        details = kwargs
        if status_code:
            details['status_code'] = status_code
        if response_body:
            details['response_body'] = response_body[:200]

        super().__init__(message, details)
        self.status_code = status_code
        self.response_body = response_body


class ResponseFormatError(DashboardError):
    """Raised when a proxy payload is missing fields or has the wrong types"""
