from typing import Any, Dict, Optional


class StudentMSError(Exception):
    """
    Base class for every custom error in the application.
    Keeps a stable code next to the human-readable message.
    """
    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details
        super().__init__(self.message)

# =========================================================
# STORE ERRORS
# =========================================================

class StoreBootstrapError(StudentMSError):
    """
    Fatal: the store could not be opened or its schema/seed could not be
    created. Only the entry point handles it (exit status 1).
    """
    def __init__(self, message: str, stage: str = "open", details: dict = None):
        super().__init__(
            message=message,
            code=f"STORE_{stage.upper()}_ERROR",
            details=details
        )
        self.stage = stage

class StoreOperationError(StudentMSError):
    """
    A single CRUD statement failed. Raised inside the store adapter and
    turned into a False result there.
    """
    def __init__(self, operation: str, message: str):
        super().__init__(
            message=f"{operation} failed: {message}",
            code="STORE_OPERATION_ERROR",
            details={"operation": operation}
        )
        self.operation = operation
