"""Request handling logic for the ``/capital`` routes.

``CapitalHandler`` only decides *what* the answer is and never logs; it
does not build responses. Route functions in ``capitals.main`` render the
returned ``LookupOutcome`` and hand it to ``log_outcome`` for the
diagnostic line.
"""

from __future__ import annotations

import logging

from .models import CapitalOut, CapitalQuery, LookupKind, LookupOutcome
from .storage import CapitalStore

logger = logging.getLogger(__name__)


class CapitalHandler:
    def __init__(self, store: CapitalStore) -> None:
        self.store = store

    def get_capital(self, query: CapitalQuery) -> LookupOutcome:
        if query.state is None:
            return LookupOutcome(kind=LookupKind.ALL, payload=self.store.as_dict())
        capital = self.store.lookup(query.state)
        if capital is None:
            return LookupOutcome(kind=LookupKind.UNKNOWN, state=query.state)
        return LookupOutcome(
            kind=LookupKind.FOUND,
            state=query.state,
            payload=CapitalOut(state=query.state, capital=capital),
        )

    def add_capital(self) -> int:
        """Writing capitals is not supported; always answers 501."""
        return 501


def log_outcome(outcome: LookupOutcome) -> None:
    if outcome.kind is LookupKind.FOUND:
        logger.info("User requested data for %s", outcome.state)
    elif outcome.kind is LookupKind.UNKNOWN:
        logger.info("User requested data for %s but it is not in our dataset", outcome.state)
    else:
        logger.info("User is requesting all state data")
