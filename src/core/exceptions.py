"""
Custom exceptions for the Drug Query API.
Provides specific error types for different failure scenarios.
"""


class DrugQueryException(Exception):
    """Base exception for all application errors."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationException(DrugQueryException):
    """Raised when request data validation fails."""
    pass


class QueryNotFoundException(DrugQueryException):
    """Raised when a saved query does not exist."""
    pass


class DynamoDBException(DrugQueryException):
    """Raised when DynamoDB operation fails."""
    pass


class ExportException(DrugQueryException):
    """Raised when CSV export fails."""
    pass
