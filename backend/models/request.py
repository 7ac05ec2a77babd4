from typing import List, Optional

from pydantic import Field

from .base import WireModel


class Author(WireModel):
    """Metadata about the account that posted the content."""
    username: Optional[str] = None
    display_name: Optional[str] = None
    followers: Optional[int] = None
    verified: Optional[bool] = None
    account_age: Optional[str] = None


class VerificationRequest(WireModel):
    """Canonical request record produced by the input normalizer."""
    content: str
    source_url: Optional[str] = None
    platform: Optional[str] = None
    media_urls: List[str] = Field(default_factory=list)
    author: Optional[Author] = None
