from rest_framework import viewsets, status
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter

from .serializers import (
    DisputeSerializer,
    DisputeDetailSerializer,
    DisputeVoteSerializer,
    CreateDisputeSerializer,
    CastVoteSerializer,
    ResolveDisputeSerializer,
    DisputeFilterSerializer,
)

from apps.disputes.services import (
    create_dispute,
    cast_vote,
    resolve_dispute,
    list_team_disputes,
    get_fine_dispute,
    get_dispute,
    get_dispute_votes,
    get_user_vote,
    # Exceptions
    DisputeError,
    DisputeForbiddenError,
    FineNotFoundError,
    DisputeNotFoundError,
)
from apps.teams.services import MembershipGate


def dispute_error_response(error: DisputeError) -> Response:
    """Translate a domain error into its fixed HTTP status."""
    if isinstance(error, DisputeForbiddenError):
        status_code = status.HTTP_403_FORBIDDEN
    elif isinstance(error, (FineNotFoundError, DisputeNotFoundError)):
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_400_BAD_REQUEST

    return Response(
        {'error': error.code, 'message': error.message},
        status=status_code
    )


def _require_membership(dispute, user):
    if not MembershipGate().is_active_member(team_id=dispute.team_id, user_id=user.id):
        raise DisputeForbiddenError("Vous n'êtes pas membre de cette équipe")


class DisputeViewSet(viewsets.ViewSet):
    """
    ViewSet for dispute actions.

    All business logic is handled by services.
    Views are thin HTTP handlers only.

    retrieve: Get a dispute with its votes (team members)
    vote: Vote on a pending dispute (team members)
    resolve: Approve or reject a dispute (team admins)
    votes: List votes on a dispute (team members)
    my_vote: Current user's vote, or {"voted": false}
    """

    permission_classes = [IsAuthenticated]
    lookup_value_regex = '[0-9a-f-]{36}'

    @extend_schema(responses={200: DisputeDetailSerializer}, tags=['disputes'])
    def retrieve(self, request, pk=None):
        """Get a dispute with its votes."""
        try:
            dispute = get_dispute(dispute_id=pk, with_votes=True)
            _require_membership(dispute, request.user)
        except DisputeError as e:
            return dispute_error_response(e)

        serializer = DisputeDetailSerializer(dispute)
        return Response(serializer.data)

    @extend_schema(
        request=CastVoteSerializer,
        responses={201: DisputeVoteSerializer},
        tags=['disputes'],
    )
    @action(detail=True, methods=['post'])
    def vote(self, request, pk=None):
        """Vote on a dispute."""
        serializer = CastVoteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            new_vote = cast_vote(
                voter=request.user,
                dispute_id=pk,
                vote=serializer.validated_data['vote']
            )
        except DisputeError as e:
            return dispute_error_response(e)

        output_serializer = DisputeVoteSerializer(new_vote)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=ResolveDisputeSerializer,
        responses={200: DisputeSerializer},
        tags=['disputes'],
    )
    @action(detail=True, methods=['post'])
    def resolve(self, request, pk=None):
        """Resolve a dispute (admin only)."""
        serializer = ResolveDisputeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            dispute = resolve_dispute(
                dispute_id=pk,
                acting_user=request.user,
                approved=serializer.validated_data['approved'],
                note=serializer.validated_data.get('note')
            )
        except DisputeError as e:
            return dispute_error_response(e)

        output_serializer = DisputeSerializer(dispute)
        return Response(output_serializer.data)

    @extend_schema(responses={200: DisputeVoteSerializer(many=True)}, tags=['disputes'])
    @action(detail=True, methods=['get'])
    def votes(self, request, pk=None):
        """List votes on a dispute."""
        try:
            dispute = get_dispute(dispute_id=pk)
            _require_membership(dispute, request.user)
        except DisputeError as e:
            return dispute_error_response(e)

        serializer = DisputeVoteSerializer(get_dispute_votes(dispute_id=dispute.id), many=True)
        return Response(serializer.data)

    @extend_schema(responses={200: DisputeVoteSerializer}, tags=['disputes'])
    @action(detail=True, methods=['get'], url_path='my-vote')
    def my_vote(self, request, pk=None):
        """Get the current user's vote on a dispute."""
        existing = get_user_vote(dispute_id=pk, user=request.user)
        if existing is None:
            return Response({'voted': False})

        serializer = DisputeVoteSerializer(existing)
        return Response(serializer.data)


@extend_schema(
    parameters=[OpenApiParameter('status', str, description='pending, approved or rejected')],
    responses={200: DisputeSerializer(many=True)},
    description="Get a team's disputes, newest first.",
    tags=['disputes'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def team_disputes(request, team_id):
    """List a team's disputes."""
    filter_serializer = DisputeFilterSerializer(data=request.query_params)
    filter_serializer.is_valid(raise_exception=True)

    try:
        disputes = list_team_disputes(
            team_id=team_id,
            user=request.user,
            status=filter_serializer.validated_data.get('status')
        )
    except DisputeError as e:
        return dispute_error_response(e)

    serializer = DisputeSerializer(disputes, many=True)
    return Response(serializer.data)


@extend_schema(
    request=CreateDisputeSerializer,
    responses={200: DisputeDetailSerializer, 201: DisputeSerializer},
    description="GET the dispute on a fine, or POST to contest the fine.",
    tags=['disputes'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def fine_dispute(request, fine_id):
    """Get or create the dispute on a fine."""
    if request.method == 'GET':
        dispute = get_fine_dispute(fine_id=fine_id)
        if dispute is None:
            return Response(
                {'error': 'NOT_FOUND', 'message': 'Aucune contestation pour cette amende'},
                status=status.HTTP_404_NOT_FOUND
            )
        try:
            _require_membership(dispute, request.user)
        except DisputeError as e:
            return dispute_error_response(e)

        return Response(DisputeDetailSerializer(dispute).data)

    serializer = CreateDisputeSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        dispute = create_dispute(
            requester=request.user,
            fine_id=fine_id,
            reason=serializer.validated_data['reason']
        )
    except DisputeError as e:
        return dispute_error_response(e)

    output_serializer = DisputeSerializer(dispute)
    return Response(output_serializer.data, status=status.HTTP_201_CREATED)
