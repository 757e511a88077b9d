from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .models import Team
from .permissions import IsTeamMember
from .serializers import DisputeSettingsSerializer, UpdateDisputeSettingsSerializer

from apps.teams.services import (
    update_dispute_settings,
    InsufficientPermissionsError,
)


@extend_schema(
    request=UpdateDisputeSettingsSerializer,
    responses={200: DisputeSettingsSerializer},
    description="Read (members) or change (admins) a team's dispute settings.",
    tags=['teams'],
)
@api_view(['GET', 'PATCH'])
@permission_classes([IsAuthenticated, IsTeamMember])
def dispute_settings(request, team_id):
    """Get or update the team's dispute settings."""
    if request.method == 'GET':
        team = get_object_or_404(Team, id=team_id)
        return Response(DisputeSettingsSerializer(team).data)

    serializer = UpdateDisputeSettingsSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        team = update_dispute_settings(
            team_id=team_id,
            user=request.user,
            **serializer.validated_data
        )
    except InsufficientPermissionsError as e:
        return Response(
            {'error': 'FORBIDDEN', 'message': str(e)},
            status=status.HTTP_403_FORBIDDEN
        )

    return Response(DisputeSettingsSerializer(team).data)
