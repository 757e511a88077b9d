import pytest
from decimal import Decimal
from uuid import uuid4

from apps.accounts.models import User
from apps.fines.models import Fine
from apps.fines.services import FineStore
from apps.teams.models import Team


@pytest.fixture
def fine(db):
    user = User.objects.create_user(
        email='offender@example.com',
        password='TestPass123!',
        display_name='Offender',
    )
    team = Team.objects.create(name='FC Amendes', created_by=user)
    return Fine.objects.create(
        team=team,
        offender=user,
        issued_by=user,
        amount=Decimal('3.00'),
    )


@pytest.mark.django_db
class TestFineStore:

    def test_get(self, fine):
        found = FineStore().get(fine_id=fine.id)

        assert found == fine
        assert found.amount == Decimal('3.00')

    def test_get_missing(self):
        assert FineStore().get(fine_id=uuid4()) is None

    def test_delete(self, fine):
        assert FineStore().delete(fine_id=fine.id) is True
        assert not Fine.objects.filter(id=fine.id).exists()

    def test_delete_missing(self):
        assert FineStore().delete(fine_id=uuid4()) is False
