from typing import List

from scoring.engine import ScoreEngine
from scoring.models import Delivery, ScoreSnapshot


def build_score_timeline(deliveries: List[Delivery]) -> List[ScoreSnapshot]:
    """
    Replays an innings from scratch.
    Returns one snapshot per delivery, in order.
    Does NOT mutate external state.
    """

    engine = ScoreEngine()

    timeline: List[ScoreSnapshot] = []

    for delivery in deliveries:
        timeline.append(apply_delivery(engine, delivery))

    return timeline


def apply_delivery(engine: ScoreEngine, delivery: Delivery) -> ScoreSnapshot:
    if delivery.kind == "run":
        return engine.record_run(delivery.runs)

    if delivery.kind == "wicket":
        return engine.record_wicket()

    return engine.record_extra(delivery.kind, delivery.runs)
