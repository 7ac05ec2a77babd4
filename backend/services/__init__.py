from .llm import GeminiClient, EngineInitResult, initialize_engine
from .normalizer import normalize_request
from .prompt_builder import build_verification_prompt, build_fallback_prompt
from .invoker import ReasoningEngine, ReasoningInvoker
from .response_validator import (
    analyze_outcome,
    default_analysis,
    validate_analysis,
    parse_verification_response,
    build_verification_result,
)
from .verification_service import VerificationService, create_verification_service

__all__ = [
    "GeminiClient",
    "EngineInitResult",
    "initialize_engine",
    "normalize_request",
    "build_verification_prompt",
    "build_fallback_prompt",
    "ReasoningEngine",
    "ReasoningInvoker",
    "default_analysis",
    "validate_analysis",
    "parse_verification_response",
    "analyze_outcome",
    "build_verification_result",
    "VerificationService",
    "create_verification_service",
]
