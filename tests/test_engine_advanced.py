import random
import pytest

from scoring.engine import ScoreEngine
from scoring.models import MatchState


# ---------------------------------------------------------
# Helpers
# ---------------------------------------------------------

def create_engine():
    return ScoreEngine(MatchState())


def random_action(engine, rng):
    roll = rng.random()

    if roll < 0.6:
        engine.record_run(rng.choice([0, 1, 2, 3, 4, 6]))
    elif roll < 0.75:
        engine.record_wicket()
    else:
        engine.record_extra(rng.choice(["wide", "no-ball"]), rng.randint(0, 6))


def all_deliveries(match):
    for over in match.completed_overs:
        yield from over
    yield from match.current_over


# ---------------------------------------------------------
# Score Invariant
# ---------------------------------------------------------

@pytest.mark.parametrize("seed", range(5))
def test_score_equals_sum_of_deliveries(seed):
    rng = random.Random(seed)
    engine = create_engine()

    for _ in range(200):
        random_action(engine, rng)

        match = engine.match
        assert match.score == sum(d.credited_runs for d in all_deliveries(match))


# ---------------------------------------------------------
# Over Completion Invariant
# ---------------------------------------------------------

@pytest.mark.parametrize("seed", range(5))
def test_every_completed_over_has_six_legal_balls(seed):
    rng = random.Random(seed)
    engine = create_engine()

    for _ in range(200):
        random_action(engine, rng)

    match = engine.match

    for over in match.completed_overs:
        assert sum(1 for d in over if d.is_legal) == 6
        # the 6th legal ball always closes the over
        assert over[-1].is_legal

    assert match.legal_balls == sum(1 for d in match.current_over if d.is_legal)
    assert 0 <= match.legal_balls <= 5


def test_extras_keep_their_position_in_finished_over():
    engine = create_engine()

    engine.record_extra("wide")
    engine.record_run(1)
    engine.record_run(2)
    engine.record_extra("no-ball", 4)
    engine.record_extra("wide", 1)
    engine.record_run(0)
    engine.record_wicket()
    engine.record_run(6)
    engine.record_run(4)

    finished = [d.label for d in engine.match.completed_overs[0]]

    assert finished == ["WD", "1", "2", "NB+4", "WD+1", "0", "W", "6", "4"]
    assert engine.match.current_over == []


# ---------------------------------------------------------
# Undo Invariants
# ---------------------------------------------------------

@pytest.mark.parametrize("seed", range(5))
def test_undo_restores_exact_previous_state(seed):
    rng = random.Random(seed)
    engine = create_engine()

    for _ in range(60):
        before = engine.match.capture()
        depth = len(engine.match.history)

        random_action(engine, rng)
        engine.undo()

        assert engine.match.capture() == before
        assert len(engine.match.history) == depth

        # keep the action so the state keeps moving
        random_action(engine, rng)


def test_undo_walks_back_to_empty():
    engine = create_engine()

    for runs in (1, 2, 3, 4, 6, 0, 1):
        engine.record_run(runs)

    while engine.undo():
        pass

    assert engine.match == MatchState()


# ---------------------------------------------------------
# Snapshot Immutability
# ---------------------------------------------------------

def test_history_is_deep_copied():
    engine = create_engine()

    for _ in range(5):
        engine.record_run(1)

    stored = engine.match.history[-1]
    stored_over = list(stored.current_over)

    engine.record_run(1)  # completes the over

    assert stored.current_over == stored_over
    assert stored.completed_overs == []


def test_snapshot_is_immutable():
    engine = create_engine()

    snapshot1 = engine.record_run(4)
    engine.record_run(6)

    assert snapshot1.score == 4
    assert snapshot1.current_over == ("4",)

    with pytest.raises(AttributeError):
        snapshot1.score = 10


# ---------------------------------------------------------
# Deterministic Replay
# ---------------------------------------------------------

def test_replay_is_deterministic():
    engine1 = create_engine()
    engine2 = create_engine()

    rng1 = random.Random(42)
    rng2 = random.Random(42)

    for _ in range(100):
        random_action(engine1, rng1)
        random_action(engine2, rng2)

    assert engine1.snapshot() == engine2.snapshot()
