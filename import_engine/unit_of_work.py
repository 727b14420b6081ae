"""
import_engine.unit_of_work - One transaction around a whole import batch.

`active` is True from begin() until a successful commit() or the
first rollback().  rollback() looks at it first, so an error raised
after the transaction was already finalised never triggers a second
rollback on a closed transaction.
"""

from __future__ import annotations

import logging
from typing import Callable

from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class UnitOfWork:

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory
        self.session: Session | None = None
        self.active = False

    def __enter__(self) -> "UnitOfWork":
        self.session = self._session_factory()
        self.session.begin()
        self.active = True
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            if exc_type is not None:
                self.rollback()
        finally:
            self.session.close()
        return False

    def commit(self) -> None:
        self.session.commit()
        self.active = False

    def rollback(self) -> None:
        if not self.active:
            return
        self.active = False
        try:
            self.session.rollback()
        except Exception:
            # The caller is already unwinding the original error.
            logger.exception("Rollback of import transaction failed")
