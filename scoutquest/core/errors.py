"""Exception types shared by the data layer, the services and the API."""


class ScoutQuestError(Exception):
    """Base exception for all Scout Quest errors.

    ``status_code`` is the HTTP status the API answers with when the error
    escapes a request handler.
    """

    status_code = 400

    def __init__(self, message, **kwargs):
        super().__init__(message)
        self.message = message
        self.metadata = kwargs

    def to_dict(self):
        result = {"detail": self.message}
        result.update(self.metadata)
        return result


class NotFoundError(ScoutQuestError):
    """Requested row does not exist (404)."""

    status_code = 404

    def __init__(self, resource, resource_id):
        super().__init__(f"{resource} not found", resource=resource, id=str(resource_id))


class AuthorizationError(ScoutQuestError):
    """Authenticated, but not allowed to perform the operation (403)."""

    status_code = 403

    def __init__(self, message="Admin privileges required"):
        super().__init__(message)


class ApplicationStateError(ScoutQuestError):
    """An application cannot move from its current status to the requested one (409)."""

    status_code = 409

    def __init__(self, current, target):
        super().__init__(
            f"Cannot change application from '{current}' to '{target}'",
            current=current,
            target=target,
        )


class DuplicateApplicationError(ScoutQuestError):
    """The scout has already applied for this achievement (409)."""

    status_code = 409

    def __init__(self, achievement_id, status):
        super().__init__(
            "You have already applied for this achievement",
            achievement_id=str(achievement_id),
            status=status,
        )


class BackendError(ScoutQuestError):
    """The Supabase backend failed or was unreachable (503).

    The original exception is chained as ``__cause__``; the message shown to
    API clients stays generic.
    """

    status_code = 503

    def __init__(self, operation, reason=""):
        super().__init__("Database temporarily unavailable")
        self.operation = operation
        self.reason = reason

    def __str__(self):
        return f"{self.operation} failed: {self.reason}"


class AuthenticationError(ScoutQuestError):
    """Missing, malformed or rejected credentials (401)."""

    status_code = 401

    def __init__(self, message="Authentication failed"):
        super().__init__(message)


class RegistrationError(ScoutQuestError):
    """The auth provider refused to create the account (400)."""

    status_code = 400

    def __init__(self, message="Could not create account"):
        super().__init__(message)
