from datetime import datetime

from models import Author, VerificationRequest
from prompts import AUTHOR_BLOCK, FALLBACK_PROMPT, VERIFICATION_PROMPT

UNKNOWN = "Unknown"


def _or_unknown(value) -> str:
    return UNKNOWN if value is None or value == "" else str(value)


def build_author_block(author: Author) -> str:
    if author is None:
        return ""
    if author.verified is None:
        verified = UNKNOWN
    else:
        verified = "Yes" if author.verified else "No"
    return AUTHOR_BLOCK.format(
        username=_or_unknown(author.username),
        display_name=_or_unknown(author.display_name),
        followers=_or_unknown(author.followers),
        verified=verified,
        account_age=_or_unknown(author.account_age),
    )


def build_verification_prompt(request: VerificationRequest, now: datetime) -> str:
    """
    Render the grounded-analysis instruction for one request.
    Args:
        request: Normalized verification request
        now: Analysis timestamp, used as the reference point for timeline analysis
    Returns:
        Instruction text; identical inputs always produce identical text
    """
    media_block = ""
    if request.media_urls:
        media_block = f"\nMedia URLs: {', '.join(request.media_urls)}\n"

    return VERIFICATION_PROMPT.format(
        timestamp=now.isoformat(),
        platform=request.platform or UNKNOWN,
        url=request.source_url or "Not provided",
        author_block=build_author_block(request.author),
        content=request.content,
        media_block=media_block,
    )


def build_fallback_prompt(request: VerificationRequest) -> str:
    """Reduced instruction for the ungrounded attempt: top-level fields only."""
    return FALLBACK_PROMPT.format(content=request.content)
