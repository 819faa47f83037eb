from typing import Callable, List, Optional

from scoring.engine import ScoreEngine
from scoring.models import Delivery, ScoreSnapshot, validate_extra_kind
from scoring.timeline import apply_delivery


class MatchSession:
    """
    Single local scoring session, driven by a front-end.

    Responsibilities:
    - Own one ScoreEngine instance
    - Two-step extra selection (pick WD/NB, then pick extra runs)
    - Confirmation-gated reset
    - Bulk replay of a ball-by-ball log (atomic)
    - Export the ball-by-ball log
    """

    def __init__(self):
        self._engine = ScoreEngine()
        self._pending_extra: Optional[str] = None

    # ---------------------------------------------------------
    # Scoring
    # ---------------------------------------------------------

    def record_run(self, runs: int) -> ScoreSnapshot:
        self._engine.record_run(runs)
        return self.get_snapshot()

    def record_wicket(self) -> ScoreSnapshot:
        self._engine.record_wicket()
        return self.get_snapshot()

    def record_extra(self, kind: str, extra_runs: int = 0) -> ScoreSnapshot:
        self._engine.record_extra(kind, extra_runs)
        return self.get_snapshot()

    def undo(self) -> ScoreSnapshot:
        self._engine.undo()
        return self.get_snapshot()

    def reset(self, confirm: Callable[[], bool]) -> bool:
        """
        Start a new match if confirm() agrees. Returns whether it did.
        """
        if not confirm():
            return False

        self._pending_extra = None
        self._engine.reset()
        return True

    # ---------------------------------------------------------
    # Extra selection
    # ---------------------------------------------------------

    @property
    def pending_extra(self) -> Optional[str]:
        return self._pending_extra

    def begin_extra(self, kind: str) -> ScoreSnapshot:
        self._pending_extra = validate_extra_kind(kind)
        return self.get_snapshot()

    def choose_extra_runs(self, extra_runs: int) -> ScoreSnapshot:
        if self._pending_extra is None:
            return self.get_snapshot()

        # record first: an invalid run count keeps the selection open
        self._engine.record_extra(self._pending_extra, extra_runs)
        self._pending_extra = None
        return self.get_snapshot()

    def cancel_extra(self) -> ScoreSnapshot:
        self._pending_extra = None
        return self.get_snapshot()

    # ---------------------------------------------------------
    # Views
    # ---------------------------------------------------------

    def get_snapshot(self) -> ScoreSnapshot:
        return self._engine.snapshot(pending_extra=self._pending_extra)

    # ---------------------------------------------------------
    # Ball-by-ball log
    # ---------------------------------------------------------

    def load_deliveries(self, labels: List[str]) -> List[ScoreSnapshot]:
        """
        Replace the session with a replay of a ball-by-ball log, e.g.
        ["1", "4", "WD+1", "W"].
        Atomic: if any label fails -> no state mutation.
        """
        if not isinstance(labels, list):
            raise ValueError("labels must be a list")

        # Convert first (validation stage)
        deliveries = [Delivery.from_label(label) for label in labels]

        temp_engine = ScoreEngine()
        temp_timeline: List[ScoreSnapshot] = [
            apply_delivery(temp_engine, d) for d in deliveries
        ]

        # If everything succeeds -> commit
        self._engine = temp_engine
        self._pending_extra = None

        return temp_timeline

    def export_deliveries(self) -> List[str]:
        match = self._engine.match

        labels = [d.label for over in match.completed_overs for d in over]
        labels.extend(d.label for d in match.current_over)
        return labels
