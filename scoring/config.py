from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
CARDS_DIR = PROJECT_ROOT / "cards"

BALLS_PER_OVER = 6
MAX_RUNS_PER_DELIVERY = 6

# Buttons offered for a legal delivery (no 5 on the pad)
RUN_CHOICES = (0, 1, 2, 3, 4, 6)
EXTRA_RUN_CHOICES = tuple(range(MAX_RUNS_PER_DELIVERY + 1))

# Every extra is worth at least one run before any additional runs
EXTRA_PENALTY = 1

WICKET_LABEL = "W"
EXTRA_LABELS = {
    "wide": "WD",
    "no-ball": "NB",
}

# Scorecard image geometry (pixels)
CARD_WIDTH = 640
CARD_HEIGHT = 420
CARD_MARGIN = 20
CARD_MAX_OVER_ROWS = 6
