from dataclasses import dataclass


@dataclass(frozen=True)
class Found:
    pass


@dataclass(frozen=True)
class NotEncountered:
    searched_amount: int


CurrentTagStatus = Found | NotEncountered


@dataclass(frozen=True)
class UpdateOutcome:
    compatible: str | None = None
    breaking: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.compatible is None and self.breaking is None


@dataclass(frozen=True)
class Resolution:
    status: CurrentTagStatus
    outcome: UpdateOutcome
