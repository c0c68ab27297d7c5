"""Combine pipeline state machine."""

from __future__ import annotations

import logging

from pixweave.core.errors import StateTransitionError
from pixweave.schemas.status import PipelineStage

logger = logging.getLogger(__name__)


# Valid state transitions
VALID_TRANSITIONS: dict[PipelineStage, set[PipelineStage]] = {
    PipelineStage.START: {PipelineStage.LOADED, PipelineStage.FAILED},
    PipelineStage.LOADED: {PipelineStage.FORMATS_VALIDATED, PipelineStage.FAILED},
    PipelineStage.FORMATS_VALIDATED: {PipelineStage.RESIZED, PipelineStage.FAILED},
    PipelineStage.RESIZED: {PipelineStage.INTERLEAVED, PipelineStage.FAILED},
    PipelineStage.INTERLEAVED: {PipelineStage.SAVED, PipelineStage.FAILED},
    PipelineStage.SAVED: set(),  # Terminal state
    PipelineStage.FAILED: set(),  # Terminal state, no retries
}


class PipelineStateMachine:
    """State machine for a single combine run."""

    def __init__(self, initial_state: PipelineStage = PipelineStage.START):
        self._state = initial_state
        self._history: list[PipelineStage] = [initial_state]
        self.failed_at: PipelineStage | None = None

    @property
    def state(self) -> PipelineStage:
        """Get current state."""
        return self._state

    @property
    def history(self) -> list[PipelineStage]:
        """Get states visited so far."""
        return list(self._history)

    def can_transition(self, new_state: PipelineStage) -> bool:
        """Check if transition to new state is valid."""
        return new_state in VALID_TRANSITIONS.get(self._state, set())

    def transition(self, new_state: PipelineStage) -> None:
        """Transition to a new state.

        Args:
            new_state: Target state

        Raises:
            StateTransitionError: If transition is invalid
        """
        if not self.can_transition(new_state):
            raise StateTransitionError(
                f"Invalid transition: {self._state.value} -> {new_state.value}"
            )

        logger.debug("Pipeline stage %s -> %s", self._state.value, new_state.value)
        if new_state == PipelineStage.FAILED:
            self.failed_at = self._state
        self._state = new_state
        self._history.append(new_state)
