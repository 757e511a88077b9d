from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from .serializers import ActivityLogSerializer, ActivityFilterSerializer
from .services import get_team_activity
from apps.teams.services import NotTeamMemberError


@extend_schema(
    parameters=[OpenApiParameter('limit', int, description='Max entries (1-200, default 50)')],
    responses={200: ActivityLogSerializer(many=True)},
    description="Get the team's activity feed, newest first.",
    tags=['activity'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def team_activity(request, team_id):
    """Get team activity feed."""
    filter_serializer = ActivityFilterSerializer(data=request.query_params)
    filter_serializer.is_valid(raise_exception=True)

    try:
        entries = get_team_activity(
            team_id=team_id,
            user=request.user,
            limit=filter_serializer.validated_data['limit']
        )
    except NotTeamMemberError as e:
        return Response(
            {'error': 'FORBIDDEN', 'message': str(e)},
            status=status.HTTP_403_FORBIDDEN
        )

    serializer = ActivityLogSerializer(entries, many=True)
    return Response(serializer.data)
