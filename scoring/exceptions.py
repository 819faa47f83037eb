class ScoringError(ValueError):
    pass


class InvalidRunsError(ScoringError):
    pass


class InvalidExtraKindError(ScoringError):
    pass


class InvalidDeliveryLabelError(ScoringError):
    pass
