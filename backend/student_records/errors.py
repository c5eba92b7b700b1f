# backend/student_records/errors.py


class RecordError(Exception):
    """Base error for record operations, rendered as a failed envelope"""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class RecordValidationError(RecordError):
    status_code = 400


class ConflictError(RecordError):
    status_code = 400


class NotFoundError(RecordError):
    status_code = 404
