"""Reconstruction of verification results from free-form engine text.

This is the only module that knows the result schema. Every field is rebuilt
through the helpers in ``utils.validation``; nothing from the parsed payload
is copied through without a clamp, enum check or type check.
"""
import uuid
from typing import Any, Dict, Optional

from config import logger
from config.constants import VALIDATION_DEFAULTS as D, VOCABULARIES as V
from models import (
    AIDetection,
    AccountAnalysis,
    AgeAnalysis,
    BiasAnalysis,
    BusinessVerification,
    Claim,
    ClaimSource,
    CorrelatedEvent,
    EventCorrelation,
    EventSource,
    InvocationOutcome,
    InvocationState,
    OriginalSource,
    SourceTracing,
    SpreadEntry,
    TimelineAnalysis,
    VerificationAnalysis,
    VerificationResult,
)
from utils.parsing import extract_json_block
from utils.validation import (
    clamp_number,
    optional_bool,
    optional_number,
    optional_string,
    validate_bool,
    validate_enum,
    validate_sequence,
    validate_string,
    validate_string_list,
)


def _score(value: Any, default: Optional[int]) -> Optional[int]:
    return clamp_number(value, D.SCORE_MIN, D.SCORE_MAX, default)


def _optional_score(value: Any) -> Optional[int]:
    return optional_number(value, D.SCORE_MIN, D.SCORE_MAX)


def _section(parsed: Dict[str, Any], key: str) -> Optional[Dict[str, Any]]:
    value = parsed.get(key)
    return value if isinstance(value, dict) else None


def default_analysis() -> VerificationAnalysis:
    """The canonical result used whenever no usable engine output exists."""
    return VerificationAnalysis(
        trust_score=D.TRUST_SCORE,
        verdict=D.VERDICT,
        verdict_summary=D.DEFAULT_VERDICT_SUMMARY,
        claims=[],
    )


def validate_claim_source(raw: Any) -> Optional[ClaimSource]:
    if not isinstance(raw, dict):
        return None
    return ClaimSource(
        title=validate_string(raw.get("title")),
        url=validate_string(raw.get("url")),
        credibility=_optional_score(raw.get("credibility")),
    )


def validate_claim(raw: Any) -> Claim:
    """Rebuild one claim. Claims are corrected, never dropped."""
    if isinstance(raw, str):
        raw = {"text": raw}
    elif not isinstance(raw, dict):
        raw = {}

    claim_id = raw.get("id")
    if not isinstance(claim_id, str) or not claim_id.strip():
        claim_id = str(uuid.uuid4())

    return Claim(
        id=claim_id,
        text=validate_string(raw.get("text")),
        type=validate_enum(raw.get("type"), V.CLAIM_TYPE, D.CLAIM_TYPE),
        verdict=validate_enum(raw.get("verdict"), V.CLAIM_VERDICT, D.CLAIM_VERDICT),
        confidence=_score(raw.get("confidence"), D.CONFIDENCE),
        evidence=optional_string(raw.get("evidence")),
        sources=validate_sequence(raw.get("sources"), validate_claim_source),
    )


def validate_ai_detection(raw: Dict[str, Any]) -> AIDetection:
    return AIDetection(
        is_ai_generated=validate_bool(raw.get("isAiGenerated")),
        confidence=_score(raw.get("confidence"), D.CONFIDENCE),
        text_ai_score=_optional_score(raw.get("textAiScore")),
        image_ai_score=_optional_score(raw.get("imageAiScore")),
        video_ai_score=_optional_score(raw.get("videoAiScore")),
        synth_id_detected=optional_bool(raw.get("synthIdDetected")),
        detection_method=validate_string(raw.get("detectionMethod"), D.DETECTION_METHOD),
    )


def validate_account_analysis(raw: Dict[str, Any]) -> AccountAnalysis:
    return AccountAnalysis(
        is_suspected_bot=validate_bool(raw.get("isSuspectedBot")),
        bot_score=_score(raw.get("botScore"), D.FLAG_SCORE),
        red_flags=validate_string_list(raw.get("redFlags")),
        account_credibility=_score(raw.get("accountCredibility"), D.CONFIDENCE),
    )


def validate_business_verification(raw: Dict[str, Any]) -> Optional[BusinessVerification]:
    """Only reported when the engine actually identified a business."""
    business_name = optional_string(raw.get("businessName"))
    if not business_name or not business_name.strip():
        return None
    return BusinessVerification(
        business_name=business_name,
        is_verified=validate_bool(raw.get("isVerified")),
        bbb_rating=optional_string(raw.get("bbbRating")),
        bbb_accredited=optional_bool(raw.get("bbbAccredited")),
        trustpilot_score=optional_number(
            raw.get("trustpilotScore"), 0, D.TRUSTPILOT_MAX, as_int=False
        ),
        domain_age=optional_string(raw.get("domainAge")),
        domain_registrar=optional_string(raw.get("domainRegistrar")),
        scam_adviser_score=_optional_score(raw.get("scamAdviserScore")),
        red_flags=validate_string_list(raw.get("redFlags")),
        recommendations=validate_string_list(raw.get("recommendations")),
    )


def validate_bias_analysis(raw: Dict[str, Any]) -> BiasAnalysis:
    return BiasAnalysis(
        political_bias=validate_enum(raw.get("politicalBias"), V.POLITICAL_BIAS, D.POLITICAL_BIAS),
        sensationalism=_score(raw.get("sensationalism"), D.FLAG_SCORE),
        emotional_language=_score(raw.get("emotionalLanguage"), D.FLAG_SCORE),
        clickbait=validate_bool(raw.get("clickbait")),
    )


def validate_original_source(raw: Any) -> Optional[OriginalSource]:
    if not isinstance(raw, dict):
        return None
    return OriginalSource(
        url=validate_string(raw.get("url")),
        platform=validate_string(raw.get("platform")),
        author=optional_string(raw.get("author")),
        published_at=optional_string(raw.get("publishedAt")),
        title=optional_string(raw.get("title")),
    )


def validate_spread_entry(raw: Any) -> Optional[SpreadEntry]:
    if not isinstance(raw, dict):
        return None
    return SpreadEntry(
        platform=validate_string(raw.get("platform")),
        url=optional_string(raw.get("url")),
        date=validate_string(raw.get("date")),
        reach=optional_number(raw.get("reach"), 0, D.REACH_MAX),
    )


def validate_source_tracing(raw: Dict[str, Any]) -> SourceTracing:
    return SourceTracing(
        original_source_found=validate_bool(raw.get("originalSourceFound")),
        original_source=validate_original_source(raw.get("originalSource")),
        spread_timeline=validate_sequence(raw.get("spreadTimeline"), validate_spread_entry),
        virality_score=_optional_score(raw.get("viralityScore")),
        first_appearance=optional_string(raw.get("firstAppearance")),
        is_original_poster=validate_bool(raw.get("isOriginalPoster")),
        source_confidence=_score(raw.get("sourceConfidence"), D.CONFIDENCE),
    )


def validate_event_source(raw: Any) -> Optional[EventSource]:
    if not isinstance(raw, dict):
        return None
    return EventSource(
        title=validate_string(raw.get("title")),
        url=validate_string(raw.get("url")),
        credibility=_score(raw.get("credibility"), D.EVENT_SOURCE_CREDIBILITY),
    )


def validate_event(raw: Any) -> Optional[CorrelatedEvent]:
    if not isinstance(raw, dict):
        return None
    return CorrelatedEvent(
        title=validate_string(raw.get("title")),
        description=validate_string(raw.get("description")),
        date=validate_string(raw.get("date")),
        location=optional_string(raw.get("location")),
        category=validate_enum(raw.get("category"), V.EVENT_CATEGORY, D.EVENT_CATEGORY),
        verified_sources=validate_sequence(raw.get("verifiedSources"), validate_event_source),
    )


def validate_event_correlation(raw: Dict[str, Any]) -> EventCorrelation:
    return EventCorrelation(
        correlated_event_found=validate_bool(raw.get("correlatedEventFound")),
        event=validate_event(raw.get("event")),
        event_match=validate_enum(raw.get("eventMatch"), V.EVENT_MATCH, D.EVENT_MATCH),
        discrepancies=validate_string_list(raw.get("discrepancies")),
        manipulation_indicators=validate_string_list(raw.get("manipulationIndicators")),
        no_correlation_reason=optional_string(raw.get("noCorrelationReason")),
    )


def validate_age_analysis(raw: Any) -> AgeAnalysis:
    if not isinstance(raw, dict):
        raw = {}
    return AgeAnalysis(
        content_age=validate_string(raw.get("contentAge")),
        relevance_today=validate_enum(raw.get("relevanceToday"), V.RELEVANCE_TODAY, D.RELEVANCE_TODAY),
        recommendation=validate_string(raw.get("recommendation")),
    )


def validate_timeline_analysis(raw: Dict[str, Any]) -> TimelineAnalysis:
    return TimelineAnalysis(
        post_date=validate_string(raw.get("postDate")),
        content_creation_date=optional_string(raw.get("contentCreationDate")),
        event_date=optional_string(raw.get("eventDate")),
        timeline_mismatch=validate_bool(raw.get("timelineMismatch")),
        mismatch_severity=validate_enum(
            raw.get("mismatchSeverity"), V.MISMATCH_SEVERITY, D.MISMATCH_SEVERITY
        ),
        mismatch_explanation=optional_string(raw.get("mismatchExplanation")),
        is_recycled_content=validate_bool(raw.get("isRecycledContent")),
        recycled_from_date=optional_string(raw.get("recycledFromDate")),
        age_analysis=validate_age_analysis(raw.get("ageAnalysis")),
    )


_SECTIONS = {
    "ai_detection": ("aiDetection", validate_ai_detection),
    "account_analysis": ("accountAnalysis", validate_account_analysis),
    "business_verification": ("businessVerification", validate_business_verification),
    "bias_analysis": ("biasAnalysis", validate_bias_analysis),
    "source_tracing": ("sourceTracing", validate_source_tracing),
    "event_correlation": ("eventCorrelation", validate_event_correlation),
    "timeline_analysis": ("timelineAnalysis", validate_timeline_analysis),
}


def validate_analysis(parsed: Any) -> VerificationAnalysis:
    """Rebuild a VerificationAnalysis field by field from a parsed payload."""
    if not isinstance(parsed, dict):
        return default_analysis()

    sections = {}
    for attr, (key, validator) in _SECTIONS.items():
        raw = _section(parsed, key)
        if raw is not None:
            sections[attr] = validator(raw)

    return VerificationAnalysis(
        trust_score=_score(parsed.get("trustScore"), D.TRUST_SCORE),
        verdict=validate_enum(parsed.get("verdict"), V.VERDICT, D.VERDICT),
        verdict_summary=validate_string(parsed.get("verdictSummary"), D.VERDICT_SUMMARY),
        claims=validate_sequence(parsed.get("claims"), validate_claim),
        **sections,
    )


def parse_verification_response(text: Optional[str]) -> VerificationAnalysis:
    """Parse raw engine text; anything unusable yields the canonical default."""
    if text is None:
        return default_analysis()

    try:
        parsed = extract_json_block(text)
        if parsed is None:
            logger.warning("No JSON object found in engine response; using default result.")
            return default_analysis()
        return validate_analysis(parsed)
    except Exception:
        logger.exception("Unexpected error validating engine response; using default result.")
        return default_analysis()


def analyze_outcome(outcome: InvocationOutcome) -> VerificationAnalysis:
    if outcome.state is InvocationState.DEFAULTED:
        return default_analysis()
    return parse_verification_response(outcome.raw_text)


def build_verification_result(
    outcome: InvocationOutcome,
    processing_time_ms: int,
    model_identifier: str,
    analysis: Optional[VerificationAnalysis] = None,
) -> VerificationResult:
    if analysis is None:
        analysis = analyze_outcome(outcome)

    return VerificationResult(
        **dict(analysis),
        processing_time_ms=max(0, int(processing_time_ms)),
        model_identifier=model_identifier,
        grounding_used=outcome.grounding_used,
    )
