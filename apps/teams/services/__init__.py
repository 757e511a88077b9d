"""
Teams app services layer.

Exposes the membership and dispute-configuration lookups other apps
consume, plus the admin-only settings update.
"""

from .exceptions import (
    TeamsServiceError,
    TeamNotFoundError,
    NotTeamMemberError,
    InsufficientPermissionsError,
)

from .membership_gate import MembershipGate

from .dispute_config import (
    TeamConfigProvider,
    TeamDisputeConfig,
    build_dispute_config,
    update_dispute_settings,
)


__all__ = [
    # Exceptions
    'TeamsServiceError',
    'TeamNotFoundError',
    'NotTeamMemberError',
    'InsufficientPermissionsError',

    # Collaborators
    'MembershipGate',
    'TeamConfigProvider',
    'TeamDisputeConfig',
    'build_dispute_config',

    # Settings
    'update_dispute_settings',
]
