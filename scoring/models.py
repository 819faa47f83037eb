from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple

from scoring.config import (
    BALLS_PER_OVER,
    EXTRA_LABELS,
    EXTRA_PENALTY,
    MAX_RUNS_PER_DELIVERY,
    WICKET_LABEL,
)
from scoring.exceptions import (
    InvalidDeliveryLabelError,
    InvalidExtraKindError,
    InvalidRunsError,
)


DeliveryKind = Literal["run", "wicket", "wide", "no-ball"]
ExtraKind = Literal["wide", "no-ball"]

EXTRA_KINDS = tuple(EXTRA_LABELS)


def validate_runs(runs) -> int:
    # bool is an int subclass; True is not a run value
    if isinstance(runs, bool) or not isinstance(runs, int):
        raise InvalidRunsError(f"Runs must be an integer, got {runs!r}")

    if runs < 0 or runs > MAX_RUNS_PER_DELIVERY:
        raise InvalidRunsError(
            f"Runs must be between 0 and {MAX_RUNS_PER_DELIVERY}, got {runs}"
        )

    return runs


def is_count(text: str) -> bool:
    # ASCII digits only; int() rejects "²" even though isdigit() accepts it
    return text.isascii() and text.isdigit()


def validate_extra_kind(kind) -> str:
    if kind not in EXTRA_KINDS:
        raise InvalidExtraKindError(f"Invalid extra kind: {kind!r}")
    return kind


# ---------------------------------------------------------
# Delivery
# ---------------------------------------------------------

@dataclass(frozen=True)
class Delivery:
    """
    One entry of an over's ball-by-ball log.

    - run:     legal ball, `runs` scored off the bat
    - wicket:  legal ball, no runs
    - wide / no-ball: extra, worth 1 + `runs`, not a legal ball
    """
    kind: DeliveryKind
    runs: int = 0

    @classmethod
    def run(cls, runs: int) -> "Delivery":
        return cls(kind="run", runs=validate_runs(runs))

    @classmethod
    def wicket(cls) -> "Delivery":
        return cls(kind="wicket")

    @classmethod
    def extra(cls, kind: ExtraKind, runs: int = 0) -> "Delivery":
        return cls(kind=validate_extra_kind(kind), runs=validate_runs(runs))

    @property
    def is_legal(self) -> bool:
        return self.kind in ("run", "wicket")

    @property
    def credited_runs(self) -> int:
        if self.kind == "wicket":
            return 0
        if self.kind == "run":
            return self.runs
        return EXTRA_PENALTY + self.runs

    @property
    def label(self) -> str:
        if self.kind == "run":
            return str(self.runs)
        if self.kind == "wicket":
            return WICKET_LABEL

        tag = EXTRA_LABELS[self.kind]
        return f"{tag}+{self.runs}" if self.runs > 0 else tag

    @classmethod
    def from_label(cls, label: str) -> "Delivery":
        """
        Parse the scoreboard encoding: "0".."6", "W", "WD", "WD+2", "NB", "NB+1".
        """
        if not isinstance(label, str) or not label:
            raise InvalidDeliveryLabelError(f"Invalid delivery label: {label!r}")

        if label == WICKET_LABEL:
            return cls.wicket()

        if is_count(label):
            try:
                return cls.run(int(label))
            except InvalidRunsError as e:
                raise InvalidDeliveryLabelError(str(e)) from e

        for kind, tag in EXTRA_LABELS.items():
            if label == tag:
                return cls.extra(kind)

            prefix = f"{tag}+"
            if label.startswith(prefix) and is_count(label[len(prefix):]):
                runs = int(label[len(prefix):])
                # "WD+0" is never produced; the plain tag is used instead
                if runs == 0:
                    break
                try:
                    return cls.extra(kind, runs)
                except InvalidRunsError as e:
                    raise InvalidDeliveryLabelError(str(e)) from e

        raise InvalidDeliveryLabelError(f"Invalid delivery label: {label!r}")


# ---------------------------------------------------------
# Match state
# ---------------------------------------------------------

@dataclass
class MatchState:
    score: int = 0
    wickets: int = 0
    completed_overs: List[List[Delivery]] = field(default_factory=list)
    current_over: List[Delivery] = field(default_factory=list)
    legal_balls: int = 0
    history: List["MatchState"] = field(default_factory=list)

    @property
    def total_legal_balls(self) -> int:
        return BALLS_PER_OVER * len(self.completed_overs) + self.legal_balls

    @property
    def run_rate(self) -> float:
        balls = self.total_legal_balls
        if balls == 0:
            return 0.0
        return self.score / balls * BALLS_PER_OVER

    def capture(self) -> "MatchState":
        """
        Deep copy of the scoring fields. The copy carries no history of its own.
        """
        return MatchState(
            score=self.score,
            wickets=self.wickets,
            completed_overs=deepcopy(self.completed_overs),
            current_over=deepcopy(self.current_over),
            legal_balls=self.legal_balls,
        )

    def restore(self, frame: "MatchState"):
        self.score = frame.score
        self.wickets = frame.wickets
        self.completed_overs = deepcopy(frame.completed_overs)
        self.current_over = deepcopy(frame.current_over)
        self.legal_balls = frame.legal_balls


# ---------------------------------------------------------
# Read-only view
# ---------------------------------------------------------

@dataclass(frozen=True)
class ScoreSnapshot:
    score: int
    wickets: int
    overs: int
    balls: int
    total_legal_balls: int
    run_rate: float
    current_over: Tuple[str, ...]
    completed_overs: Tuple[Tuple[str, ...], ...]
    can_undo: bool
    pending_extra: Optional[str] = None

    @property
    def overs_text(self) -> str:
        return f"{self.overs}.{self.balls}"

    @property
    def score_text(self) -> str:
        return f"{self.score}/{self.wickets}"
