import cv2
import numpy as np
from pathlib import Path
from typing import List, Sequence, Tuple

from scoring.config import (
    CARD_HEIGHT,
    CARD_MARGIN,
    CARD_MAX_OVER_ROWS,
    CARD_WIDTH,
    EXTRA_LABELS,
    WICKET_LABEL,
)
from scoring.models import ScoreSnapshot


# BGR
BALL_COLOURS = {
    "extra": (0, 165, 255),
    "wicket": (40, 40, 220),
    "four": (200, 120, 30),
    "six": (160, 40, 160),
    "dot": (110, 110, 110),
    "": (70, 140, 70),
}

BACKGROUND = (30, 30, 30)
WHITE = (255, 255, 255)
MUTED = (170, 170, 170)

BALL_GAP = 6
OVERFLOW_WIDTH = 40


def ball_style(label: str) -> str:
    if not label:
        return ""
    if any(label.startswith(tag) for tag in EXTRA_LABELS.values()):
        return "extra"
    if label == WICKET_LABEL:
        return "wicket"
    if label == "4":
        return "four"
    if label == "6":
        return "six"
    if label == "0":
        return "dot"
    return ""


class ScorecardRenderer:

    def __init__(self, width: int = CARD_WIDTH, height: int = CARD_HEIGHT):
        if width <= 0 or height <= 0:
            raise ValueError("Card size must be positive")

        self.width = width
        self.height = height

    def render(self, snapshot: ScoreSnapshot) -> np.ndarray:
        frame = np.full((self.height, self.width, 3), BACKGROUND, dtype=np.uint8)
        self.draw(frame, snapshot)
        return frame

    def save(self, path, snapshot: ScoreSnapshot) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        if not cv2.imwrite(str(path), self.render(snapshot)):
            raise RuntimeError(f"Cannot write scorecard: {path}")

        return path

    # ----------------------------------------------------
    # DRAWING
    # ----------------------------------------------------

    def draw(self, frame: np.ndarray, snapshot: ScoreSnapshot):

        font = cv2.FONT_HERSHEY_SIMPLEX
        x = CARD_MARGIN
        y = CARD_MARGIN + 40

        # Score
        cv2.putText(frame, snapshot.score_text, (x, y), font, 1.4, WHITE, 3)

        # Meta
        meta = (
            f"Overs: {snapshot.overs_text}   "
            f"CRR: {snapshot.run_rate:.2f}   "
            f"Balls: {snapshot.total_legal_balls}"
        )
        cv2.putText(frame, meta, (x, y + 35), font, 0.6, MUTED, 1)

        # Finished overs, most recent rows only
        y += 80
        cv2.putText(frame, "Over Summary", (x, y), font, 0.6, WHITE, 2)

        first = max(0, len(snapshot.completed_overs) - CARD_MAX_OVER_ROWS)

        if not snapshot.completed_overs:
            y += 30
            cv2.putText(frame, "No completed overs yet", (x, y), font, 0.5, MUTED, 1)

        for idx in range(first, len(snapshot.completed_overs)):
            y += 30
            self._draw_over_row(frame, f"Over {idx + 1}", snapshot.completed_overs[idx], x, y)

        # Current over
        y += 40
        label = f"Current Over ({snapshot.overs + 1})"
        if snapshot.current_over:
            self._draw_over_row(frame, label, snapshot.current_over, x, y)
        else:
            cv2.putText(frame, f"{label}  - no balls yet -", (x, y), font, 0.5, MUTED, 1)

        if snapshot.pending_extra:
            prompt = f"Add {EXTRA_LABELS[snapshot.pending_extra]} runs (0-6)"
            cv2.putText(
                frame,
                prompt,
                (x, self.height - CARD_MARGIN),
                font,
                0.6,
                BALL_COLOURS["extra"],
                2,
            )

    def layout_row(self, balls: Sequence[str], x: int) -> Tuple[List[Tuple[str, int, int]], int]:
        """
        Place ball chips left to right starting at x.

        Returns ([(label, left, width), ...], hidden) where hidden is the
        number of trailing balls that did not fit. When hidden > 0 the last
        OVERFLOW_WIDTH pixels of the row are left free for a "+N" marker.
        """
        right = self.width - CARD_MARGIN
        widths = [max(24, 11 * len(ball) + 10) for ball in balls]

        total = sum(widths) + BALL_GAP * max(0, len(widths) - 1)
        if x + total > right:
            right -= OVERFLOW_WIDTH

        placed = []
        bx = x
        for ball, width in zip(balls, widths):
            if bx + width > right:
                break
            placed.append((ball, bx, width))
            bx += width + BALL_GAP

        return placed, len(balls) - len(placed)

    def _draw_over_row(self, frame, title: str, balls: Sequence[str], x: int, y: int):
        font = cv2.FONT_HERSHEY_SIMPLEX
        cv2.putText(frame, title, (x, y), font, 0.5, MUTED, 1)

        placed, hidden = self.layout_row(balls, x + 160)

        for ball, bx, width in placed:
            colour = BALL_COLOURS[ball_style(ball)]

            cv2.rectangle(frame, (bx, y - 17), (bx + width, y + 5), colour, -1)
            cv2.putText(frame, ball, (bx + 5, y), font, 0.45, WHITE, 1)

        if hidden:
            marker_x = self.width - CARD_MARGIN - OVERFLOW_WIDTH + BALL_GAP
            cv2.putText(frame, f"+{hidden}", (marker_x, y), font, 0.45, MUTED, 1)
