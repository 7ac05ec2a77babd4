import json
import uuid

import pytest

from models import (
    AttemptRecord,
    AttemptTier,
    InvocationOutcome,
    VerificationAnalysis,
)
from services.response_validator import (
    build_verification_result,
    default_analysis,
    parse_verification_response,
    validate_analysis,
    validate_claim,
)

VERDICTS = {"verified", "mostly_true", "mixed", "misleading", "false", "unverifiable"}


def _scores(node):
    """Yield every numeric leaf of a dumped result."""
    if isinstance(node, dict):
        for value in node.values():
            yield from _scores(value)
    elif isinstance(node, list):
        for value in node:
            yield from _scores(value)
    elif isinstance(node, (int, float)) and not isinstance(node, bool):
        yield node


class TestDefaultResult:
    def test_canonical_default(self):
        result = default_analysis()
        assert result.trust_score == 50
        assert result.verdict == "unverifiable"
        assert result.verdict_summary == "Unable to verify the content. Please review manually."
        assert result.claims == []
        assert result.ai_detection is None
        assert result.timeline_analysis is None

    def test_no_text_returns_default(self):
        assert parse_verification_response(None) == default_analysis()

    def test_no_json_returns_default(self):
        assert parse_verification_response("I could not analyze this post.") == default_analysis()

    def test_invalid_json_returns_default(self):
        assert parse_verification_response('{"trustScore": 80, "verdict": }') == default_analysis()

    def test_json_array_returns_default(self):
        assert validate_analysis(["not", "an", "object"]) == default_analysis()


class TestIdentityAndIdempotence:
    def test_valid_payload_is_unchanged(self, valid_payload):
        """Already-valid data passes through field for field."""
        result = validate_analysis(valid_payload)
        assert result.to_dict() == valid_payload

    def test_valid_text_is_unchanged(self, valid_payload, valid_response_text):
        result = parse_verification_response(valid_response_text)
        assert result.to_dict() == valid_payload

    def test_idempotent_on_own_output(self, valid_payload):
        first = validate_analysis(valid_payload)
        second = validate_analysis(first.to_dict())
        assert second == first

    def test_idempotent_on_corrected_output(self):
        messy = {
            "trustScore": "250",
            "verdict": "Maybe",
            "claims": ["bare claim", {"confidence": -4}, 7],
            "biasAnalysis": {"politicalBias": "far-left"},
            "timelineAnalysis": {"ageAnalysis": "old"},
        }
        first = validate_analysis(messy)
        second = validate_analysis(first.to_dict())
        assert second == first


class TestTopLevelFields:
    def test_enum_correction(self):
        assert validate_analysis({"verdict": "maybe"}).verdict == "unverifiable"

    def test_case_variant_rejected(self):
        assert validate_analysis({"verdict": "Verified"}).verdict == "unverifiable"

    @pytest.mark.parametrize("raw, expected", [(150, 100), (-20, 0), (0, 0), ("65", 65), (None, 50), ("n/a", 50)])
    def test_trust_score_clamping(self, raw, expected):
        assert validate_analysis({"trustScore": raw}).trust_score == expected

    def test_missing_claims_default_to_empty(self):
        result = validate_analysis({"trustScore": 40, "verdict": "mixed"})
        assert result.claims == []
        assert result.to_dict()["claims"] == []

    def test_missing_summary_default(self):
        assert validate_analysis({}).verdict_summary == "Unable to generate summary"

    def test_non_string_summary_default(self):
        assert validate_analysis({"verdictSummary": {"text": "x"}}).verdict_summary == "Unable to generate summary"

    def test_empty_summary_kept(self):
        assert validate_analysis({"verdictSummary": ""}).verdict_summary == ""

    def test_unknown_keys_ignored(self):
        result = validate_analysis({"verdict": "false", "secret": "value"})
        assert "secret" not in result.to_dict()


class TestClaims:
    def test_missing_id_is_generated(self):
        claim = validate_claim({"text": "x"})
        uuid.UUID(claim.id)

    def test_generated_ids_are_unique(self):
        assert validate_claim({}).id != validate_claim({}).id

    def test_invalid_type_and_verdict_corrected(self):
        claim = validate_claim({"id": "c1", "text": "x", "type": "rumour", "verdict": "probably"})
        assert claim.type == "factual"
        assert claim.verdict == "unverified"
        assert claim.confidence == 50

    def test_invalid_claims_are_corrected_not_dropped(self):
        result = validate_analysis({"claims": [{"type": "bogus"}, "a bare claim", 42]})
        assert len(result.claims) == 3
        assert result.claims[1].text == "a bare claim"
        assert result.claims[2].text == ""

    def test_sources_validated(self):
        claim = validate_claim({
            "sources": [
                {"title": "A", "url": "https://a.example", "credibility": 130},
                "https://b.example",
                {"title": 5},
            ]
        })
        assert len(claim.sources) == 2
        assert claim.sources[0].credibility == 100
        assert claim.sources[1].title == ""
        assert claim.sources[1].credibility is None

    def test_sources_not_a_list(self):
        assert validate_claim({"sources": "none"}).sources == []


class TestOptionalSections:
    def test_sections_absent_when_missing(self):
        result = validate_analysis({"verdict": "mixed"})
        dumped = result.to_dict()
        for key in (
            "aiDetection", "accountAnalysis", "businessVerification", "biasAnalysis",
            "sourceTracing", "eventCorrelation", "timelineAnalysis",
        ):
            assert key not in dumped

    def test_sections_absent_when_not_objects(self):
        result = validate_analysis({"aiDetection": "yes", "biasAnalysis": [1, 2], "sourceTracing": None})
        assert result.ai_detection is None
        assert result.bias_analysis is None
        assert result.source_tracing is None

    def test_partial_ai_detection(self):
        result = validate_analysis({"aiDetection": {"isAiGenerated": True, "textAiScore": 140}})
        assert result.ai_detection.confidence == 50
        assert result.ai_detection.is_ai_generated is True
        assert result.ai_detection.text_ai_score == 100
        assert result.ai_detection.image_ai_score is None
        assert result.ai_detection.detection_method == "pattern_analysis"

    def test_empty_detection_method_kept(self):
        result = validate_analysis({"aiDetection": {"detectionMethod": ""}})
        assert result.ai_detection.detection_method == ""

    def test_account_analysis_defaults(self):
        result = validate_analysis({"accountAnalysis": {"redFlags": ["new account", 3]}})
        account = result.account_analysis
        assert account.bot_score == 0
        assert account.account_credibility == 50
        assert account.is_suspected_bot is False
        assert account.red_flags == ["new account"]

    def test_business_requires_name(self):
        assert validate_analysis({"businessVerification": {"isVerified": True}}).business_verification is None
        assert validate_analysis({"businessVerification": {"businessName": "  "}}).business_verification is None

    def test_business_fields_clamped(self):
        result = validate_analysis({
            "businessVerification": {
                "businessName": "Acme",
                "trustpilotScore": 7.5,
                "scamAdviserScore": -3,
                "bbbAccredited": "yes",
            }
        })
        business = result.business_verification
        assert business.trustpilot_score == 5.0
        assert business.scam_adviser_score == 0
        assert business.bbb_accredited is True
        assert business.red_flags == []
        assert business.recommendations == []

    def test_bias_defaults(self):
        bias = validate_analysis({"biasAnalysis": {"politicalBias": "Left", "sensationalism": 300}}).bias_analysis
        assert bias.political_bias == "unknown"
        assert bias.sensationalism == 100
        assert bias.emotional_language == 0
        assert bias.clickbait is False

    def test_source_tracing(self):
        tracing = validate_analysis({
            "sourceTracing": {
                "originalSource": "somewhere",
                "spreadTimeline": [{"platform": "tiktok", "date": "2026-01-01", "reach": -5}, "bad"],
                "viralityScore": "high",
            }
        }).source_tracing
        assert tracing.original_source is None
        assert len(tracing.spread_timeline) == 1
        assert tracing.spread_timeline[0].reach == 0
        assert tracing.virality_score is None
        assert tracing.source_confidence == 50

    def test_event_correlation(self):
        correlation = validate_analysis({
            "eventCorrelation": {
                "event": {"title": "Flood", "category": "weather", "verifiedSources": [{"title": "Agency"}]},
                "eventMatch": "partial",
                "discrepancies": "none",
            }
        }).event_correlation
        assert correlation.event.category == "other"
        assert correlation.event.verified_sources[0].credibility == 50
        assert correlation.event_match == "not_found"
        assert correlation.discrepancies == []
        assert correlation.manipulation_indicators == []

    def test_timeline_analysis(self):
        timeline = validate_analysis({
            "timelineAnalysis": {
                "mismatchSeverity": "huge",
                "isRecycledContent": True,
                "ageAnalysis": {"relevanceToday": "ancient"},
            }
        }).timeline_analysis
        assert timeline.mismatch_severity == "none"
        assert timeline.is_recycled_content is True
        assert timeline.age_analysis.relevance_today == "current"
        assert timeline.age_analysis.content_age == ""

    def test_timeline_missing_age_analysis(self):
        timeline = validate_analysis({"timelineAnalysis": {}}).timeline_analysis
        assert timeline.age_analysis.relevance_today == "current"


class TestInvariants:
    @pytest.mark.parametrize("payload", [
        {"trustScore": 1e9, "claims": [{"confidence": -1e9}]},
        {"aiDetection": {"confidence": "999", "textAiScore": -1, "videoAiScore": 101}},
        {"sourceTracing": {"viralityScore": 1000, "sourceConfidence": -1}},
        {"eventCorrelation": {"event": {"verifiedSources": [{"credibility": 500}]}}},
    ])
    def test_scores_bounded(self, payload):
        dumped = validate_analysis(payload).to_dict()
        scores = list(_scores(dumped))
        assert scores
        assert all(0 <= s <= 100 for s in scores)

    def test_deeply_malformed_payload(self):
        payload = {key: [None, {"x": "junk"}] for key in (
            "trustScore", "verdict", "verdictSummary", "claims", "aiDetection", "accountAnalysis",
            "businessVerification", "biasAnalysis", "sourceTracing", "eventCorrelation", "timelineAnalysis",
        )}
        result = parse_verification_response(json.dumps(payload))
        assert isinstance(result, VerificationAnalysis)
        assert result.verdict in VERDICTS
        assert 0 <= result.trust_score <= 100
        assert len(result.claims) == 2


class TestBuildVerificationResult:
    def test_grounded(self, valid_response_text, valid_payload):
        outcome = InvocationOutcome.grounded(valid_response_text, [AttemptRecord(AttemptTier.PRIMARY, 12)])
        result = build_verification_result(outcome, 1234, "gemini-2.5-flash")
        assert result.grounding_used is True
        assert result.processing_time_ms == 1234
        assert result.model_identifier == "gemini-2.5-flash"
        assert result.trust_score == valid_payload["trustScore"]
        dumped = result.to_dict()
        assert dumped["groundingUsed"] is True
        assert dumped["processingTimeMs"] == 1234
        assert dumped["modelIdentifier"] == "gemini-2.5-flash"

    def test_ungrounded_unparseable(self):
        outcome = InvocationOutcome.ungrounded("no json at all", [])
        result = build_verification_result(outcome, 10, "m")
        assert result.grounding_used is False
        assert result.verdict == "unverifiable"
        assert result.verdict_summary == "Unable to verify the content. Please review manually."

    def test_defaulted(self):
        result = build_verification_result(InvocationOutcome.defaulted([]), 5, "m")
        assert result.grounding_used is False
        assert result.trust_score == 50
        assert result.claims == []

    def test_negative_time_clamped(self):
        result = build_verification_result(InvocationOutcome.defaulted([]), -3, "m")
        assert result.processing_time_ms == 0

    def test_precomputed_analysis_used(self):
        analysis = validate_analysis({"trustScore": 12, "verdict": "false"})
        outcome = InvocationOutcome.grounded("ignored", [])
        result = build_verification_result(outcome, 7, "m", analysis=analysis)
        assert result.trust_score == 12
        assert result.verdict == "false"
        assert result.grounding_used is True


class TestDecoderLimits:
    """Payloads the JSON decoder rejects with errors other than JSONDecodeError."""

    @pytest.mark.parametrize("text", [
        '{"trustScore": ' + "9" * 5000 + '}',
        '{"a": ' + "[" * 100000 + "]" * 100000 + '}',
    ], ids=["oversized-integer", "deep-nesting"])
    def test_falls_back_to_default(self, text):
        result = parse_verification_response(text)
        assert result.verdict == "unverifiable"
        assert result.trust_score == 50
