import pytest
from datetime import timedelta
from django.utils import timezone

from apps.activity.models import ActivityLog, ActivityType
from apps.activity.services import ActivityRecorder, get_team_activity
from apps.teams.models import TeamMember
from apps.teams.services import NotTeamMemberError


@pytest.mark.django_db
class TestActivityRecorder:

    def test_append(self, team, user):
        entry = ActivityRecorder().append(
            team_id=team.id,
            user_id=user.id,
            activity_type=ActivityType.DISPUTE_CREATED,
            metadata={'dispute_id': 'abc', 'fine_id': 'def'},
        )

        stored = ActivityLog.objects.get(id=entry.id)
        assert stored.user == user
        assert stored.activity_type == ActivityType.DISPUTE_CREATED
        assert stored.metadata == {'dispute_id': 'abc', 'fine_id': 'def'}

    def test_append_system_entry(self, team):
        """Entries without an actor are system actions."""
        entry = ActivityRecorder().append(
            team_id=team.id,
            user_id=None,
            activity_type=ActivityType.DISPUTE_RESOLVED,
        )

        entry.refresh_from_db()
        assert entry.user is None
        assert entry.metadata == {}


@pytest.mark.django_db
class TestTeamActivity:

    def test_newest_first(self, team, user):
        recorder = ActivityRecorder()
        older = recorder.append(team_id=team.id, user_id=user.id, activity_type=ActivityType.FINE_ISSUED)
        newer = recorder.append(team_id=team.id, user_id=user.id, activity_type=ActivityType.DISPUTE_CREATED)
        ActivityLog.objects.filter(id=older.id).update(created_at=timezone.now() - timedelta(hours=1))

        entries = list(get_team_activity(team_id=team.id, user=user))

        assert [e.id for e in entries] == [newer.id, older.id]

    def test_limit(self, team, user):
        recorder = ActivityRecorder()
        for _ in range(5):
            recorder.append(team_id=team.id, user_id=user.id, activity_type=ActivityType.FINE_ISSUED)

        assert len(get_team_activity(team_id=team.id, user=user, limit=3)) == 3

    def test_non_member(self, team, other_user):
        with pytest.raises(NotTeamMemberError):
            get_team_activity(team_id=team.id, user=other_user)

    def test_removed_member(self, team, user):
        TeamMember.objects.filter(team=team, user=user).update(is_deleted=True)

        with pytest.raises(NotTeamMemberError):
            get_team_activity(team_id=team.id, user=user)
