from .base import WireModel
from .request import Author, VerificationRequest
from .result import (
    VerdictType,
    ClaimType,
    ClaimVerdict,
    ClaimSource,
    Claim,
    AIDetection,
    AccountAnalysis,
    BusinessVerification,
    BiasAnalysis,
    OriginalSource,
    SpreadEntry,
    SourceTracing,
    EventSource,
    CorrelatedEvent,
    EventCorrelation,
    AgeAnalysis,
    TimelineAnalysis,
    VerificationAnalysis,
    VerificationResult,
)
from .outcome import InvocationState, AttemptTier, AttemptRecord, InvocationOutcome

__all__ = [
    "WireModel",

    "Author",
    "VerificationRequest",

    "VerdictType",
    "ClaimType",
    "ClaimVerdict",
    "ClaimSource",
    "Claim",
    "AIDetection",
    "AccountAnalysis",
    "BusinessVerification",
    "BiasAnalysis",
    "OriginalSource",
    "SpreadEntry",
    "SourceTracing",
    "EventSource",
    "CorrelatedEvent",
    "EventCorrelation",
    "AgeAnalysis",
    "TimelineAnalysis",
    "VerificationAnalysis",
    "VerificationResult",

    "InvocationState",
    "AttemptTier",
    "AttemptRecord",
    "InvocationOutcome",
]
