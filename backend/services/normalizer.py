from typing import Any, List, Mapping, Optional, Union

from exceptions import InvalidInputError
from models import Author, VerificationRequest


def _clean_string(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def _first_string(value: Mapping, *keys: str) -> Optional[str]:
    """First non-blank string among the given alias keys."""
    for key in keys:
        cleaned = _clean_string(value.get(key))
        if cleaned:
            return cleaned
    return None


def _clean_media_urls(value: Any) -> List[str]:
    if not isinstance(value, (list, tuple)):
        return []
    urls = [_clean_string(url) for url in value]
    return [url for url in urls if url]


def _clean_author(value: Any) -> Optional[Author]:
    if isinstance(value, Author):
        value = value.model_dump()
    if not isinstance(value, Mapping):
        return None

    followers = value.get("followers")
    if isinstance(followers, bool) or not isinstance(followers, int) or followers < 0:
        followers = None
    verified = value.get("verified")
    if not isinstance(verified, bool):
        verified = None

    fields = {
        "username": _clean_string(value.get("username")),
        "display_name": _first_string(value, "displayName", "display_name"),
        "followers": followers,
        "verified": verified,
        "account_age": _first_string(value, "accountAge", "account_age"),
    }
    if all(v is None for v in fields.values()):
        return None
    return Author(**fields)


def normalize_request(payload: Union[Mapping[str, Any], VerificationRequest]) -> VerificationRequest:
    """
    Shape loosely-typed caller input into a canonical VerificationRequest.
    Args:
        payload: Mapping with camelCase or snake_case keys, or an existing request
    Returns:
        VerificationRequest with trimmed strings and defaulted optionals
    Raises:
        InvalidInputError: if content is missing or blank
    """
    if isinstance(payload, VerificationRequest):
        payload = payload.model_dump()
    if not isinstance(payload, Mapping):
        raise InvalidInputError("request", "expected an object")

    content = payload.get("content")
    if not isinstance(content, str):
        raise InvalidInputError("content", "must be a string")
    content = content.strip()
    if not content:
        raise InvalidInputError("content", "cannot be empty")

    source_url = _first_string(payload, "sourceUrl", "source_url", "url")
    media_urls = payload.get("mediaUrls")
    if media_urls is None:
        media_urls = payload.get("media_urls")

    return VerificationRequest(
        content=content,
        source_url=source_url,
        platform=_clean_string(payload.get("platform")),
        media_urls=_clean_media_urls(media_urls),
        author=_clean_author(payload.get("author")),
    )
