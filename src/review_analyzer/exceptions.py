"""
Base exception for Review Analyzer.

Every layer (inference, store, session, classification) derives its errors
from ReviewAnalyzerError so the session handlers can catch any expected
failure with a single except clause and show its user_message.
"""


class ReviewAnalyzerError(Exception):
    """
    Base exception for all expected Review Analyzer failures.
    
    Attributes:
        message: Developer-facing description (logged)
        details: Structured context for logs/metrics
        user_message: Short human-readable text shown in the error region
    """
    
    default_user_message = "Something went wrong"
    
    def __init__(
        self,
        message: str,
        details: dict | None = None,
        user_message: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.user_message = user_message or self.default_user_message
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message
