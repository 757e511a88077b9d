"""
Fine store.

Narrow read/delete access to fines for other apps. Deleting through the
store is the only supported way to remove a fine outside the admin.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import DEFAULT_DB_ALIAS

from apps.fines.models import Fine

logger = logging.getLogger(__name__)


class FineStore:

    def get(self, *, fine_id: UUID, using: str = DEFAULT_DB_ALIAS) -> Optional[Fine]:
        return (
            Fine.objects
            .using(using)
            .select_related('team', 'offender')
            .filter(id=fine_id)
            .first()
        )

    def delete(self, *, fine_id: UUID, using: str = DEFAULT_DB_ALIAS) -> bool:
        """
        Delete a fine. Rows referencing the fine are cleaned up by the ORM
        cascade; disputes keep their fine id on purpose.

        Returns:
            True if a fine was deleted, False if it was already gone
        """
        deleted, _ = Fine.objects.using(using).filter(id=fine_id).delete()
        if deleted:
            logger.info("Deleted fine %s", fine_id)
        return bool(deleted)
