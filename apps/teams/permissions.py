from rest_framework import permissions

from apps.teams.services import MembershipGate


class IsTeamMember(permissions.BasePermission):
    """
    Permission: User must be an active member of the team in the URL.
    """

    message = "Vous n'êtes pas membre de cette équipe"

    def has_permission(self, request, view):
        team_id = view.kwargs.get('team_id')
        if team_id is None:
            return True
        return MembershipGate().is_active_member(team_id=team_id, user_id=request.user.id)

