"""Error hierarchy shared by repositories, services and routes."""


class PortalError(Exception):
    """Base for failures surfaced to API callers as a single opaque error."""

    status_code = 500

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(message if not details else f"{message}: {details}")


class NotFound(PortalError):
    """Referenced job, user or application id does not resolve."""

    status_code = 404

    def __init__(self, resource_type: str, identifier: str):
        self.resource_type = resource_type
        self.identifier = identifier
        super().__init__(f"{resource_type} not found", identifier)


class ValidationFailure(PortalError):
    """Required field missing or caller input malformed."""

    status_code = 400


class DuplicateApplication(ValidationFailure):
    status_code = 409

    def __init__(self, user_id: str, job_id: str):
        super().__init__("Already applied to this job", f"user={user_id} job={job_id}")


class StoreFailure(PortalError):
    """The underlying repository call failed."""

    status_code = 500
