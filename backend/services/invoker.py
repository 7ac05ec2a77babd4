import asyncio
import time
from datetime import datetime
from typing import Any, Awaitable, Callable, List, Optional, Protocol

from config import logger
from config.constants import LLM_CONFIG, SAFETY_CATEGORIES
from exceptions import FallbackInvocationError, InvocationError
from models import AttemptRecord, AttemptTier, InvocationOutcome, VerificationRequest
from .prompt_builder import build_fallback_prompt, build_verification_prompt


class ReasoningEngine(Protocol):
    async def generate_content(
        self,
        prompt: str,
        *,
        grounding: bool = False,
        safety_settings: Optional[List[dict]] = None,
        generation_config: Optional[dict] = None,
    ) -> str:
        ...


class ReasoningInvoker:
    """Two-tier call strategy against the reasoning engine.

    A grounded primary attempt, then at most one ungrounded fallback. Nothing
    raised by the engine (including a timeout) escapes ``invoke``; exhausting
    both attempts yields a DEFAULTED outcome instead.
    """

    def __init__(self, engine: ReasoningEngine, attempt_timeout: float = LLM_CONFIG.ATTEMPT_TIMEOUT):
        self.engine = engine
        self.attempt_timeout = attempt_timeout

    async def invoke(self, request: VerificationRequest, now: datetime) -> InvocationOutcome:
        attempts: List[AttemptRecord] = []

        primary_prompt = build_verification_prompt(request, now)
        text, record = await self._attempt(
            AttemptTier.PRIMARY,
            lambda: self.engine.generate_content(
                primary_prompt,
                grounding=True,
                safety_settings=SAFETY_CATEGORIES.settings(),
                generation_config=LLM_CONFIG.generation_config(),
            ),
        )
        attempts.append(record)
        if text is not None:
            return InvocationOutcome.grounded(text, attempts)

        logger.info("Using fallback verification without web grounding")
        fallback_prompt = build_fallback_prompt(request)
        text, record = await self._attempt(
            AttemptTier.FALLBACK,
            lambda: self.engine.generate_content(fallback_prompt),
        )
        attempts.append(record)
        if text is not None:
            return InvocationOutcome.ungrounded(text, attempts)

        logger.warning("Both reasoning attempts failed; the default result will be used.")
        return InvocationOutcome.defaulted(attempts)

    async def _attempt(
        self,
        tier: AttemptTier,
        call: Callable[[], Awaitable[Any]],
    ):
        start = time.perf_counter()
        try:
            text = await asyncio.wait_for(call(), timeout=self.attempt_timeout)
        except asyncio.TimeoutError:
            reason = f"timed out after {self.attempt_timeout}s"
        except Exception as e:
            reason = getattr(e, "reason", None) or str(e) or type(e).__name__
        else:
            elapsed = int((time.perf_counter() - start) * 1000)
            if isinstance(text, str):
                return text, AttemptRecord(tier, elapsed)
            reason = f"unexpected response type {type(text).__name__}"

        elapsed = int((time.perf_counter() - start) * 1000)
        if tier is AttemptTier.FALLBACK:
            error = FallbackInvocationError(reason)
        else:
            error = InvocationError(reason, tier=tier.value)
        logger.warning(f"Reasoning attempt '{tier.value}' failed after {elapsed}ms: {error}")
        return None, AttemptRecord(tier, elapsed, error)
