class InventoryError(Exception):
    """Base exception for the inventory backend."""

    def __init__(self, message=None, code=None, details=None):
        """Initialize the exception.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
        """
        self.message = message or "An error occurred in the inventory backend"
        self.code = code
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class DatabaseError(InventoryError):
    """Exception raised for database-related errors."""

    def __init__(self, message=None, code=None, details=None):
        message = message or "Database error"
        super().__init__(message, code, details)


class DatabaseConnectionError(DatabaseError):
    """Exception raised when the database server cannot be reached."""

    def __init__(self, message=None, code=None, details=None):
        message = message or "Could not connect to the database"
        super().__init__(message, code or 'DB_CONNECT', details)


class SeedError(InventoryError):
    """Exception raised when the seeding pipeline cannot continue."""

    def __init__(self, message=None, code=None, details=None):
        message = message or "Seeding error"
        super().__init__(message, code, details)
