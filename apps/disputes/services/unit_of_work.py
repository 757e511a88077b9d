"""
Unit of work.

An explicit handle on one database transaction. Dispute services open a
UnitOfWork and pass it down to every step that reads or writes, so the
whole operation commits or rolls back together.
"""

from django.db import DEFAULT_DB_ALIAS, transaction


class UnitOfWork:
    """
    Context manager around ``transaction.atomic`` bound to one database.

    Usage:
        with UnitOfWork() as uow:
            fine = fine_store.get(fine_id=fine_id, using=uow.using)
            ...
    """

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using
        self._atomic = None

    def __enter__(self):
        self._atomic = transaction.atomic(using=self.using)
        self._atomic.__enter__()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        try:
            return self._atomic.__exit__(exc_type, exc_value, traceback)
        finally:
            self._atomic = None

    @property
    def is_active(self) -> bool:
        return self._atomic is not None

    def ensure_active(self) -> None:
        """Fail fast when a step is called outside of an open unit of work."""
        if not self.is_active or not transaction.get_connection(self.using).in_atomic_block:
            raise RuntimeError("This operation must run inside an open UnitOfWork")

    def on_commit(self, func) -> None:
        transaction.on_commit(func, using=self.using)
