import argparse
from pathlib import Path
from typing import Callable, Optional

from scoring.config import EXTRA_LABELS, EXTRA_RUN_CHOICES, RUN_CHOICES
from scoring.exceptions import ScoringError
from scoring.match_session import MatchSession
from scoring.models import ScoreSnapshot, is_count
from render.renderer import ScorecardRenderer


HELP = f"{' '.join(map(str, RUN_CHOICES))} runs | W wicket | WD / NB extra | U undo | R reset | Q quit"

EXTRA_COMMANDS = {tag: kind for kind, tag in EXTRA_LABELS.items()}


def format_scoreboard(snapshot: ScoreSnapshot) -> str:
    lines = [
        f"{snapshot.score_text}  Overs: {snapshot.overs_text}  "
        f"CRR: {snapshot.run_rate:.2f}  Balls: {snapshot.total_legal_balls}",
    ]

    for idx, over in enumerate(snapshot.completed_overs, 1):
        lines.append(f"  Over {idx}: {' '.join(over)}")

    current = " ".join(snapshot.current_over) or "- no balls yet -"
    lines.append(f"  Current Over ({snapshot.overs + 1}): {current}")

    return "\n".join(lines)


def handle_command(
    session: MatchSession,
    command: str,
    ask: Callable[[str], str],
) -> Optional[ScoreSnapshot]:
    """
    Apply one front-end command. Returns the new snapshot, or None on quit.
    """
    command = command.strip().upper()

    if command == "Q":
        return None

    if is_count(command):
        if int(command) not in RUN_CHOICES:
            raise ScoringError(f"Runs must be one of {RUN_CHOICES}, got {command}")
        return session.record_run(int(command))

    if command == "W":
        return session.record_wicket()

    if command in EXTRA_COMMANDS:
        session.begin_extra(EXTRA_COMMANDS[command])

        try:
            answer = ask(
                f"Add {command} runs. Extra already gives 1 run. "
                f"Choose additional runs ({EXTRA_RUN_CHOICES[0]}-{EXTRA_RUN_CHOICES[-1]}) or C to cancel: "
            ).strip().upper()
        except EOFError:
            session.cancel_extra()
            raise

        if answer == "C":
            return session.cancel_extra()

        if not is_count(answer):
            session.cancel_extra()
            raise ScoringError(f"Invalid extra runs: {answer!r}")

        try:
            return session.choose_extra_runs(int(answer))
        finally:
            session.cancel_extra()

    if command == "U":
        return session.undo()

    if command == "R":
        session.reset(lambda: ask("Start new match? [y/N] ").strip().lower() == "y")
        return session.get_snapshot()

    raise ScoringError(f"Unknown command: {command!r}")


def main():
    parser = argparse.ArgumentParser(description="Interactive cricket scorer")
    parser.add_argument("--card", type=Path, default=None, help="Write scorecard PNG after every change")
    args = parser.parse_args()

    session = MatchSession()
    renderer = ScorecardRenderer() if args.card else None

    print(HELP)
    print(format_scoreboard(session.get_snapshot()))

    while True:
        try:
            command = input("> ")
        except EOFError:
            break

        try:
            snapshot = handle_command(session, command, input)
        except EOFError:
            break
        except ScoringError as e:
            print(f"[score] {e}")
            continue

        if snapshot is None:
            break

        print(format_scoreboard(snapshot))

        if renderer is not None:
            renderer.save(args.card, snapshot)
            print(f"[card] wrote {args.card}")


if __name__ == "__main__":
    main()
