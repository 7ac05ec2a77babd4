from typing import List, Literal, Optional

from pydantic import Field

from .base import WireModel

VerdictType = Literal["verified", "mostly_true", "mixed", "misleading", "false", "unverifiable"]
ClaimType = Literal["factual", "opinion", "speculation", "exaggeration", "misleading"]
ClaimVerdict = Literal["verified", "partially_true", "unverified", "false", "opinion"]
PoliticalBias = Literal["left", "center-left", "center", "center-right", "right", "unknown"]
EventCategory = Literal[
    "news", "incident", "announcement", "disaster", "political", "entertainment", "sports", "other"
]
EventMatch = Literal["exact", "related", "misattributed", "fabricated", "not_found"]
MismatchSeverity = Literal["none", "minor", "significant", "critical"]
RelevanceToday = Literal["current", "recent", "dated", "outdated", "historical"]


class ClaimSource(WireModel):
    title: str
    url: str
    credibility: Optional[int] = Field(default=None, ge=0, le=100)


class Claim(WireModel):
    """An atomic statement extracted from the content, typed and verdicted on its own."""
    id: str
    text: str
    type: ClaimType
    verdict: ClaimVerdict
    confidence: int = Field(ge=0, le=100)
    evidence: Optional[str] = None
    sources: List[ClaimSource] = Field(default_factory=list)


class AIDetection(WireModel):
    is_ai_generated: bool
    confidence: int = Field(ge=0, le=100)
    text_ai_score: Optional[int] = Field(default=None, ge=0, le=100)
    image_ai_score: Optional[int] = Field(default=None, ge=0, le=100)
    video_ai_score: Optional[int] = Field(default=None, ge=0, le=100)
    synth_id_detected: Optional[bool] = None
    detection_method: str


class AccountAnalysis(WireModel):
    is_suspected_bot: bool
    bot_score: int = Field(ge=0, le=100)
    red_flags: List[str] = Field(default_factory=list)
    account_credibility: int = Field(ge=0, le=100)


class BusinessVerification(WireModel):
    business_name: str
    is_verified: bool
    bbb_rating: Optional[str] = None
    bbb_accredited: Optional[bool] = None
    trustpilot_score: Optional[float] = Field(default=None, ge=0, le=5)
    domain_age: Optional[str] = None
    domain_registrar: Optional[str] = None
    scam_adviser_score: Optional[int] = Field(default=None, ge=0, le=100)
    red_flags: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class BiasAnalysis(WireModel):
    political_bias: PoliticalBias
    sensationalism: int = Field(ge=0, le=100)
    emotional_language: int = Field(ge=0, le=100)
    clickbait: bool


class OriginalSource(WireModel):
    url: str
    platform: str
    author: Optional[str] = None
    published_at: Optional[str] = None
    title: Optional[str] = None


class SpreadEntry(WireModel):
    platform: str
    url: Optional[str] = None
    date: str
    reach: Optional[int] = Field(default=None, ge=0)


class SourceTracing(WireModel):
    """Earliest known appearance of the content and how it spread."""
    original_source_found: bool
    original_source: Optional[OriginalSource] = None
    spread_timeline: List[SpreadEntry] = Field(default_factory=list)
    virality_score: Optional[int] = Field(default=None, ge=0, le=100)
    first_appearance: Optional[str] = None
    is_original_poster: bool
    source_confidence: int = Field(ge=0, le=100)


class EventSource(WireModel):
    title: str
    url: str
    credibility: int = Field(ge=0, le=100)


class CorrelatedEvent(WireModel):
    title: str
    description: str
    date: str
    location: Optional[str] = None
    category: EventCategory
    verified_sources: List[EventSource] = Field(default_factory=list)


class EventCorrelation(WireModel):
    """Match between the content and a real-world event record."""
    correlated_event_found: bool
    event: Optional[CorrelatedEvent] = None
    event_match: EventMatch
    discrepancies: List[str] = Field(default_factory=list)
    manipulation_indicators: List[str] = Field(default_factory=list)
    no_correlation_reason: Optional[str] = None


class AgeAnalysis(WireModel):
    content_age: str
    relevance_today: RelevanceToday
    recommendation: str


class TimelineAnalysis(WireModel):
    """Content-creation vs event vs post dates, and recycled-content detection."""
    post_date: str
    content_creation_date: Optional[str] = None
    event_date: Optional[str] = None
    timeline_mismatch: bool
    mismatch_severity: MismatchSeverity
    mismatch_explanation: Optional[str] = None
    is_recycled_content: bool
    recycled_from_date: Optional[str] = None
    age_analysis: AgeAnalysis


class VerificationAnalysis(WireModel):
    """The part of a verification result reconstructed from engine output."""
    trust_score: int = Field(ge=0, le=100)
    verdict: VerdictType
    verdict_summary: str
    claims: List[Claim] = Field(default_factory=list)
    ai_detection: Optional[AIDetection] = None
    account_analysis: Optional[AccountAnalysis] = None
    business_verification: Optional[BusinessVerification] = None
    bias_analysis: Optional[BiasAnalysis] = None
    source_tracing: Optional[SourceTracing] = None
    event_correlation: Optional[EventCorrelation] = None
    timeline_analysis: Optional[TimelineAnalysis] = None


class VerificationResult(VerificationAnalysis):
    processing_time_ms: int = Field(ge=0)
    model_identifier: str
    grounding_used: bool
