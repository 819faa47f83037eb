import argparse
from pathlib import Path

from scoring.config import CARDS_DIR
from scoring.models import Delivery
from scoring.timeline import build_score_timeline
from render.renderer import ScorecardRenderer


SAMPLE_INNINGS = [
    "1", "0", "4", "WD", "1", "6", "W",
    "2", "NB+1", "0", "1", "4", "1", "WD+2",
    "6", "0", "1",
]


def main():
    parser = argparse.ArgumentParser(description="Render a scorecard for a sample innings")
    parser.add_argument("--output", type=Path, default=CARDS_DIR / "demo.png")
    parser.add_argument("deliveries", nargs="*", help="Ball labels, e.g. 4 W WD+1")
    args = parser.parse_args()

    labels = args.deliveries or SAMPLE_INNINGS
    timeline = build_score_timeline([Delivery.from_label(label) for label in labels])

    if not timeline:
        raise ValueError("Timeline cannot be empty")

    final = timeline[-1]
    print(f"[demo] {len(timeline)} deliveries -> {final.score_text} ({final.overs_text} ov)")

    path = ScorecardRenderer().save(args.output, final)
    print(f"[demo] wrote {path}")


if __name__ == "__main__":
    main()
