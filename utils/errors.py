"""
Application error taxonomy.

Services raise these; ``app.register_error_handlers`` renders them as
``{"error": message}`` with the class's status code.
"""


class FamilyTrackerError(Exception):
    status_code = 500
    default_message = 'Internal Server Error'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthenticationRequired(FamilyTrackerError):
    """No session, or credentials did not verify."""
    status_code = 401
    default_message = 'Authentication required'


class ValidationError(FamilyTrackerError):
    """Malformed or missing request fields."""
    status_code = 400
    default_message = 'Invalid request'


class AuthorizationError(FamilyTrackerError):
    """Authenticated, but not allowed to touch this family."""
    status_code = 403
    default_message = 'Forbidden'


class NotFound(FamilyTrackerError):
    status_code = 404
    default_message = 'Not found'


class ConflictError(FamilyTrackerError):
    """Duplicate username, email or invite."""
    status_code = 400
    default_message = 'Already exists'
