from __future__ import annotations

import logging

_logger = logging.getLogger(__name__)


class GenerationStoppingCriteria:
    """Stops after a fixed number of generations.

    ``is_met`` is evaluated once per generation boundary and counts its own
    calls, so a limit of ``n`` lets exactly ``n`` generations run.
    """

    def __init__(self, limit: int) -> None:
        if limit < 0:
            raise ValueError("Generation limit must be non-negative.")
        self.limit = int(limit)
        self.generation = 0

    def is_met(self) -> bool:
        if self.generation >= self.limit:
            _logger.debug("Generation limit %d reached", self.limit)
            return True
        self.generation += 1
        return False

    def __repr__(self) -> str:
        return f"GenerationStoppingCriteria(limit={self.limit}, generation={self.generation})"


__all__ = ["GenerationStoppingCriteria"]
