from scoring.models import Delivery
from scoring.timeline import build_score_timeline


# -------------------------------------------------
# Basic Timeline Build
# -------------------------------------------------

def test_timeline_basic_build():
    deliveries = [Delivery.run(2) for _ in range(5)]

    timeline = build_score_timeline(deliveries)

    assert len(timeline) == 5
    assert timeline[-1].score == 10
    assert [s.balls for s in timeline] == [1, 2, 3, 4, 5]


# -------------------------------------------------
# Over Boundary
# -------------------------------------------------

def test_timeline_crosses_over_boundary():
    deliveries = [Delivery.run(1)] * 6 + [Delivery.extra("wide"), Delivery.wicket()]

    timeline = build_score_timeline(deliveries)

    assert timeline[5].overs == 1
    assert timeline[5].current_over == ()
    assert timeline[5].completed_overs == (("1",) * 6,)

    last = timeline[-1]
    assert last.overs_text == "1.1"
    assert last.current_over == ("WD", "W")
    assert last.score_text == "7/1"


# -------------------------------------------------
# Input Not Mutated
# -------------------------------------------------

def test_timeline_does_not_mutate_input():
    deliveries = [Delivery.run(4), Delivery.extra("no-ball", 1)]
    copy = list(deliveries)

    build_score_timeline(deliveries)

    assert deliveries == copy


# -------------------------------------------------
# Empty Deliveries
# -------------------------------------------------

def test_empty_timeline():
    timeline = build_score_timeline([])

    assert timeline == []
