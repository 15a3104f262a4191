# utils/errors.py


class AttendanceError(Exception):
    """Base exception for attendance processing failures."""


class BatchError(AttendanceError):
    """Raised when a whole upload batch has to be rejected."""


class EmptySheetError(BatchError):
    """Raised when a workbook has no sheets to read."""

    def __init__(self, message: str = "Excel file is empty"):
        super().__init__(message)


class NoValidRowsError(BatchError):
    """Raised when no row in the upload yields an attendance record."""

    def __init__(self, message: str = "No valid attendance rows found in file"):
        super().__init__(message)


class UnsupportedFormatError(BatchError):
    """Raised when the uploaded file is not a readable spreadsheet or CSV."""


class PersistenceFailure(AttendanceError):
    """Raised when the database cannot store a processed batch."""

    def __init__(self, detail: str):
        super().__init__(f"Failed to save attendance data: {detail}")
        self.detail = detail
