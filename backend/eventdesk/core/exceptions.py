"""
Error taxonomy for the registration intake pipeline.

Every error carries the HTTP status it is answered with, so the route layer
converts them without a lookup table.
"""


class RegistrationError(Exception):
    """Base class for every failure the register endpoint reports."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(RegistrationError):
    """Missing or malformed client input."""

    status_code = 400


# ===========================================
# Not found
# ===========================================


class NotFoundError(RegistrationError):
    status_code = 404


class CompanyNotFound(NotFoundError):
    def __init__(self, company_name: str):
        self.company_name = company_name
        super().__init__("Company not found")


class EventNotFound(NotFoundError):
    def __init__(self, company_name: str, event_name: str):
        self.company_name = company_name
        self.event_name = event_name
        super().__init__("Event not found")


class EventDataNotFound(NotFoundError):
    def __init__(self, company_name: str, event_name: str):
        self.company_name = company_name
        self.event_name = event_name
        super().__init__("Event data not found")


# ===========================================
# Administrative gates
# ===========================================


class DisabledError(RegistrationError):
    status_code = 403


class CompanyDisabled(DisabledError):
    def __init__(self, company_name: str, message: str = "Company is disabled, registration is not available"):
        self.company_name = company_name
        super().__init__(message)


class EventDisabled(DisabledError):
    def __init__(self, company_name: str, event_name: str):
        self.company_name = company_name
        self.event_name = event_name
        super().__init__("Event registration is currently disabled")


# ===========================================
# Conflicts
# ===========================================


class ConflictError(RegistrationError):
    status_code = 400


class AlreadyRegistered(ConflictError):
    def __init__(self, event_name: str):
        self.event_name = event_name
        super().__init__("You are already registered for this event")


class ProcessingError(RegistrationError):
    """Unexpected store or internal fault. The message is always a fixed string."""

    status_code = 500


class TableNotFoundError(LookupError):
    """
    Raised by the table store when appending to a table that was never created.

    Store-level, outside the RegistrationError hierarchy: the pipeline's
    processing stage catches it like any other store fault.
    """

    def __init__(self, tenant: str, table_name: str):
        self.tenant = tenant
        self.table_name = table_name
        super().__init__(f"Table '{table_name}' does not exist in sheet '{tenant}'")
