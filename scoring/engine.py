from typing import Optional

from scoring.config import BALLS_PER_OVER
from scoring.models import Delivery, MatchState, ScoreSnapshot


class ScoreEngine:
    """
    Cricket scoring engine for a single innings.

    Responsibilities:
    - Apply runs, wickets and extras to MatchState
    - Count legal balls and complete overs
    - Keep an undo history of deep-copied states
    - Produce read-only ScoreSnapshot views
    """

    def __init__(self, match: Optional[MatchState] = None):
        self.match = match if match is not None else MatchState()
        self._validate_initial_state()

    # =========================================================
    # PUBLIC API
    # =========================================================

    def record_run(self, runs: int) -> ScoreSnapshot:
        return self._record_legal(Delivery.run(runs))

    def record_wicket(self) -> ScoreSnapshot:
        return self._record_legal(Delivery.wicket())

    def record_extra(self, kind: str, extra_runs: int = 0) -> ScoreSnapshot:
        """
        Record a wide or no-ball. Never counts as a legal ball.
        """
        delivery = Delivery.extra(kind, extra_runs)

        self._save_history()

        self.match.score += delivery.credited_runs
        self.match.current_over.append(delivery)

        return self.snapshot()

    def undo(self) -> bool:
        """
        Restore the state before the last mutating call.
        Returns False (and changes nothing) when there is nothing to undo.
        """
        if not self.match.history:
            return False

        last = self.match.history.pop()
        self.match.restore(last)
        return True

    def reset(self) -> ScoreSnapshot:
        """
        Start a new match. The reset itself goes on the undo history.
        """
        self._save_history()

        self.match.score = 0
        self.match.wickets = 0
        self.match.completed_overs = []
        self.match.current_over = []
        self.match.legal_balls = 0

        return self.snapshot()

    @property
    def can_undo(self) -> bool:
        return bool(self.match.history)

    # =========================================================
    # DELIVERY LOGIC
    # =========================================================

    def _record_legal(self, delivery: Delivery) -> ScoreSnapshot:
        self._save_history()

        self.match.score += delivery.credited_runs

        if delivery.kind == "wicket":
            self.match.wickets += 1

        self._advance_over(delivery)

        return self.snapshot()

    def _advance_over(self, delivery: Delivery):
        # legal_balls counts balls already bowled, so 5 means this is the 6th
        if self.match.legal_balls == BALLS_PER_OVER - 1:
            finished_over = self.match.current_over + [delivery]
            self.match.completed_overs.append(finished_over)
            self.match.legal_balls = 0
            self.match.current_over = []
        else:
            self.match.legal_balls += 1
            self.match.current_over.append(delivery)

    def _save_history(self):
        self.match.history.append(self.match.capture())

    # =========================================================
    # VALIDATION
    # =========================================================

    def _validate_initial_state(self):
        legal_in_over = sum(1 for d in self.match.current_over if d.is_legal)

        if self.match.legal_balls != legal_in_over:
            raise ValueError("legal_balls must match legal deliveries in current_over")

        if self.match.legal_balls >= BALLS_PER_OVER:
            raise ValueError("current_over cannot hold a complete over")

    # =========================================================
    # SNAPSHOT
    # =========================================================

    def snapshot(self, pending_extra: Optional[str] = None) -> ScoreSnapshot:
        match = self.match

        return ScoreSnapshot(
            score=match.score,
            wickets=match.wickets,
            overs=len(match.completed_overs),
            balls=match.legal_balls,
            total_legal_balls=match.total_legal_balls,
            run_rate=match.run_rate,
            current_over=tuple(d.label for d in match.current_over),
            completed_overs=tuple(
                tuple(d.label for d in over) for over in match.completed_overs
            ),
            can_undo=self.can_undo,
            pending_extra=pending_extra,
        )
