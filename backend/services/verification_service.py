import time
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping, Optional, Union

from config import logger
from config.settings import Settings, get_settings
from exceptions import NotConfiguredError
from models import InvocationState, VerificationRequest, VerificationResult
from .invoker import ReasoningEngine, ReasoningInvoker
from .llm import initialize_engine
from .normalizer import normalize_request
from .response_validator import analyze_outcome, build_verification_result


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class VerificationService:

    def __init__(
        self,
        engine: Optional[ReasoningEngine],
        model_identifier: str,
        attempt_timeout: float = 45.0,
        clock: Callable[[], datetime] = _utcnow,
        status_message: Optional[str] = None,
    ):
        self.engine = engine
        self.model_identifier = model_identifier
        self.clock = clock
        self.invoker = ReasoningInvoker(engine, attempt_timeout) if engine is not None else None
        self._status_message = status_message

    def is_configured(self) -> bool:
        return self.invoker is not None

    def get_status(self) -> Dict[str, Any]:
        if self.is_configured():
            return {"configured": True, "message": self._status_message or "Verification service ready"}
        return {"configured": False, "message": self._status_message or "GEMINI_API_KEY not set"}

    async def verify(
        self,
        request: Union[Mapping[str, Any], VerificationRequest],
    ) -> VerificationResult:
        """
        Verify a piece of content.
        Args:
            request: Caller input, loosely typed
        Returns:
            A fully validated VerificationResult; engine and parse failures
            are absorbed into the result
        Raises:
            NotConfiguredError: if no engine client was supplied
            InvalidInputError: if the content is missing or blank
        """
        if not self.is_configured():
            raise NotConfiguredError()

        start_time = time.perf_counter()
        normalized = normalize_request(request)
        logger.info(f"Starting verification for: {normalized.source_url or 'direct content'}")

        outcome = await self.invoker.invoke(normalized, self.clock())

        analysis = analyze_outcome(outcome)
        processing_time_ms = int((time.perf_counter() - start_time) * 1000)
        result = build_verification_result(
            outcome, processing_time_ms, self.model_identifier, analysis=analysis
        )

        if outcome.state is InvocationState.DEFAULTED:
            logger.warning(f"Verification defaulted after {processing_time_ms}ms")
        else:
            logger.info(
                f"Verification completed in {processing_time_ms}ms "
                f"(state={outcome.state.value}, trustScore={result.trust_score}, verdict={result.verdict})"
            )
        return result


def create_verification_service(settings: Optional[Settings] = None) -> VerificationService:
    settings = settings or get_settings()
    init = initialize_engine(settings)
    return VerificationService(
        engine=init.client,
        model_identifier=settings.GEMINI_MODEL,
        attempt_timeout=settings.VERIFY_ATTEMPT_TIMEOUT,
        status_message=init.message,
    )
