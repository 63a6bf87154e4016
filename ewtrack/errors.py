"""
Error taxonomy for the item lifecycle.

Helpers raise these; the application renders them as
``{"success": false, "message": ...}`` with the matching HTTP status.
"""


class LifecycleError(Exception):
    status_code = 500

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self):
        return {"success": False, "message": self.message}


class ValidationError(LifecycleError):
    """Missing or malformed request fields."""
    status_code = 400


class UnauthorizedError(LifecycleError):
    """Requester is known but lacks rights on the resource."""
    status_code = 403


class NotFoundError(LifecycleError):
    status_code = 404


class InvalidStateError(LifecycleError):
    """Operation not allowed in the resource's current status."""
    status_code = 409


class InternalError(LifecycleError):
    status_code = 500
