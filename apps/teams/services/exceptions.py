"""
Domain-specific exceptions for teams app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class TeamsServiceError(Exception):
    """Base exception for all teams service errors."""
    pass


class TeamNotFoundError(TeamsServiceError):
    """Raised when a team does not exist."""
    pass


class NotTeamMemberError(TeamsServiceError):
    """Raised when a user is not an active member of the team."""
    pass


class InsufficientPermissionsError(TeamsServiceError):
    """Raised when a user lacks required permissions for an action."""
    pass
