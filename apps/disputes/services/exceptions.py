"""
Domain exceptions for disputes app.

Every exception carries a stable ``code`` that views send back to the
client next to the human message.

Exception Hierarchy:
    DisputeError (base)
    ├── FineNotFoundError          FINE_NOT_FOUND
    ├── DisputeForbiddenError      FORBIDDEN
    ├── AlreadyDisputedError       ALREADY_DISPUTED
    ├── DisputesDisabledError      DISPUTES_DISABLED
    ├── DisputeNotFoundError       DISPUTE_NOT_FOUND
    ├── DisputeClosedError         DISPUTE_CLOSED
    └── AlreadyVotedError          ALREADY_VOTED
"""


class DisputeError(Exception):
    """Base exception for all dispute service errors."""

    code = 'DISPUTE_ERROR'
    default_message = 'Dispute operation failed'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)

    @property
    def message(self):
        return str(self)


class FineNotFoundError(DisputeError):
    """Raised when the contested fine does not exist."""

    code = 'FINE_NOT_FOUND'
    default_message = 'Amende non trouvée'


class DisputeForbiddenError(DisputeError):
    """Raised when the user is not allowed to act on the dispute."""

    code = 'FORBIDDEN'
    default_message = "Vous n'avez pas la permission d'effectuer cette action"


class AlreadyDisputedError(DisputeError):
    """Raised when the fine already has a dispute."""

    code = 'ALREADY_DISPUTED'
    default_message = 'Cette amende est déjà contestée'


class DisputesDisabledError(DisputeError):
    """Raised when the team does not accept disputes."""

    code = 'DISPUTES_DISABLED'
    default_message = 'Les contestations ne sont pas activées pour cette équipe'


class DisputeNotFoundError(DisputeError):
    """Raised when a dispute does not exist."""

    code = 'DISPUTE_NOT_FOUND'
    default_message = 'Contestation non trouvée'


class DisputeClosedError(DisputeError):
    """Raised when acting on a dispute that is no longer pending."""

    code = 'DISPUTE_CLOSED'
    default_message = 'Cette contestation est déjà résolue'


class AlreadyVotedError(DisputeError):
    """Raised when a user votes twice on the same dispute."""

    code = 'ALREADY_VOTED'
    default_message = 'Vous avez déjà voté'
