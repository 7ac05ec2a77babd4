from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from exceptions import InvocationError


class InvocationState(Enum):
    GROUNDED = "grounded"
    UNGROUNDED = "ungrounded"
    DEFAULTED = "defaulted"


class AttemptTier(Enum):
    PRIMARY = "primary"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class AttemptRecord:
    tier: AttemptTier
    elapsed_ms: int
    error: Optional[InvocationError] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class InvocationOutcome:
    """Terminal state of the two-tier engine call for one verification run."""
    state: InvocationState
    raw_text: Optional[str]
    grounding_used: bool
    attempts: List[AttemptRecord] = field(default_factory=list)

    @classmethod
    def grounded(cls, raw_text: str, attempts: List[AttemptRecord]) -> "InvocationOutcome":
        return cls(InvocationState.GROUNDED, raw_text, True, list(attempts))

    @classmethod
    def ungrounded(cls, raw_text: str, attempts: List[AttemptRecord]) -> "InvocationOutcome":
        return cls(InvocationState.UNGROUNDED, raw_text, False, list(attempts))

    @classmethod
    def defaulted(cls, attempts: List[AttemptRecord]) -> "InvocationOutcome":
        return cls(InvocationState.DEFAULTED, None, False, list(attempts))
