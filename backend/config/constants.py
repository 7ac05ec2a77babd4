from dataclasses import dataclass
from typing import Dict, FrozenSet, Tuple

@dataclass(frozen=True)
class LLMConfig:
    REQUEST_TIMEOUT: float = 60.0
    ATTEMPT_TIMEOUT: float = 45.0

    TEMPERATURE: float = 0.3
    TOP_P: float = 0.8
    MAX_OUTPUT_TOKENS: int = 4096

    def generation_config(self) -> Dict[str, float]:
        return {
            "temperature": self.TEMPERATURE,
            "topP": self.TOP_P,
            "maxOutputTokens": self.MAX_OUTPUT_TOKENS,
        }

@dataclass(frozen=True)
class ValidationDefaults:
    """Documented fallbacks for fields the engine omits or garbles."""
    SCORE_MIN: int = 0
    SCORE_MAX: int = 100

    TRUST_SCORE: int = 50
    CONFIDENCE: int = 50
    FLAG_SCORE: int = 0
    EVENT_SOURCE_CREDIBILITY: int = 50

    TRUSTPILOT_MAX: float = 5.0
    REACH_MAX: int = 10 ** 12

    VERDICT: str = "unverifiable"
    CLAIM_TYPE: str = "factual"
    CLAIM_VERDICT: str = "unverified"
    POLITICAL_BIAS: str = "unknown"
    EVENT_CATEGORY: str = "other"
    EVENT_MATCH: str = "not_found"
    MISMATCH_SEVERITY: str = "none"
    RELEVANCE_TODAY: str = "current"
    DETECTION_METHOD: str = "pattern_analysis"

    VERDICT_SUMMARY: str = "Unable to generate summary"
    DEFAULT_VERDICT_SUMMARY: str = "Unable to verify the content. Please review manually."

@dataclass(frozen=True)
class Vocabularies:
    """Closed value sets for every enumerated result field."""
    VERDICT: FrozenSet[str] = frozenset({
        "verified", "mostly_true", "mixed", "misleading", "false", "unverifiable"
    })
    CLAIM_TYPE: FrozenSet[str] = frozenset({
        "factual", "opinion", "speculation", "exaggeration", "misleading"
    })
    CLAIM_VERDICT: FrozenSet[str] = frozenset({
        "verified", "partially_true", "unverified", "false", "opinion"
    })
    POLITICAL_BIAS: FrozenSet[str] = frozenset({
        "left", "center-left", "center", "center-right", "right", "unknown"
    })
    EVENT_CATEGORY: FrozenSet[str] = frozenset({
        "news", "incident", "announcement", "disaster", "political",
        "entertainment", "sports", "other"
    })
    EVENT_MATCH: FrozenSet[str] = frozenset({
        "exact", "related", "misattributed", "fabricated", "not_found"
    })
    MISMATCH_SEVERITY: FrozenSet[str] = frozenset({
        "none", "minor", "significant", "critical"
    })
    RELEVANCE_TODAY: FrozenSet[str] = frozenset({
        "current", "recent", "dated", "outdated", "historical"
    })

@dataclass(frozen=True)
class SafetyCategories:
    """Harm categories relaxed on the grounded attempt so flagged content stays analyzable."""
    CATEGORIES: Tuple[str, ...] = (
        "HARM_CATEGORY_HARASSMENT",
        "HARM_CATEGORY_HATE_SPEECH",
        "HARM_CATEGORY_SEXUALLY_EXPLICIT",
        "HARM_CATEGORY_DANGEROUS_CONTENT",
    )
    THRESHOLD: str = "BLOCK_NONE"

    def settings(self):
        return [{"category": c, "threshold": self.THRESHOLD} for c in self.CATEGORIES]

LLM_CONFIG = LLMConfig()
VALIDATION_DEFAULTS = ValidationDefaults()
VOCABULARIES = Vocabularies()
SAFETY_CATEGORIES = SafetyCategories()
