"""Shared error definitions for the CRM backend."""


class CrmError(Exception):
    """Base exception for the CRM backend."""
    pass


class StoreUnavailable(CrmError):
    """No relational store is configured; callers should use mock data."""

    def __init__(self, message: str = "Database not configured; use mock data."):
        super().__init__(message)
        self.message = message


class NotFound(CrmError):
    """The targeted record does not exist."""

    def __init__(self, kind: str, record_id: str):
        super().__init__(f"{kind} not found: {record_id}")
        self.kind = kind
        self.record_id = record_id


class CaseNotFound(NotFound):
    """Case not found in database."""

    def __init__(self, case_id: str):
        super().__init__("Case", case_id)
        self.case_id = case_id


class DuplicateCaseNumber(CrmError):
    """A case with the same case number already exists."""

    def __init__(self, case_number: str):
        super().__init__(f"Case number {case_number} already exists")
        self.case_number = case_number
        self.message = str(self)


class CaseStoreError(CrmError):
    """Unexpected failure while reading or writing cases.

    The message is safe to show to callers; the underlying cause is only
    logged.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
