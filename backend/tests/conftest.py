import copy
import json
import pytest
import sys
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

sys.path.insert(0, str(Path(__file__).parent.parent))


VALID_PAYLOAD = {
    "trustScore": 72,
    "verdict": "mostly_true",
    "verdictSummary": "The central claim is accurate but the casualty figure is overstated.",
    "claims": [
        {
            "id": "claim-1",
            "text": "The bridge closed on Monday.",
            "type": "factual",
            "verdict": "verified",
            "confidence": 90,
            "evidence": "City transport office confirmed the closure.",
            "sources": [
                {"title": "City Transport", "url": "https://transport.example.gov/notice", "credibility": 95}
            ],
        },
        {
            "id": "claim-2",
            "text": "Thousands were stranded.",
            "type": "exaggeration",
            "verdict": "partially_true",
            "confidence": 60,
            "sources": [],
        },
    ],
    "aiDetection": {
        "isAiGenerated": False,
        "confidence": 80,
        "textAiScore": 12,
        "detectionMethod": "pattern_analysis",
    },
    "accountAnalysis": {
        "isSuspectedBot": False,
        "botScore": 5,
        "redFlags": [],
        "accountCredibility": 70,
    },
    "businessVerification": {
        "businessName": "Acme Ferries",
        "isVerified": True,
        "trustpilotScore": 4.2,
        "scamAdviserScore": 88,
        "redFlags": [],
        "recommendations": ["Book through the official site."],
    },
    "biasAnalysis": {
        "politicalBias": "center",
        "sensationalism": 35,
        "emotionalLanguage": 40,
        "clickbait": False,
    },
    "sourceTracing": {
        "originalSourceFound": True,
        "originalSource": {
            "url": "https://news.example.com/bridge",
            "platform": "news",
            "author": "Local Desk",
            "publishedAt": "2026-10-12T08:00:00Z",
        },
        "spreadTimeline": [
            {"platform": "x", "url": "https://x.example/post/1", "date": "2026-10-12T09:30:00Z", "reach": 15000},
            {"platform": "facebook", "date": "2026-10-13T10:00:00Z"},
        ],
        "viralityScore": 55,
        "firstAppearance": "2026-10-12T08:00:00Z",
        "isOriginalPoster": False,
        "sourceConfidence": 75,
    },
    "eventCorrelation": {
        "correlatedEventFound": True,
        "event": {
            "title": "Harbour bridge closure",
            "description": "The harbour bridge closed for emergency repairs.",
            "date": "2026-10-12",
            "location": "Harbour City",
            "category": "news",
            "verifiedSources": [
                {"title": "City Transport", "url": "https://transport.example.gov/notice", "credibility": 95}
            ],
        },
        "eventMatch": "related",
        "discrepancies": ["Post overstates the number of stranded commuters."],
        "manipulationIndicators": [],
    },
    "timelineAnalysis": {
        "postDate": "2026-10-13",
        "contentCreationDate": "2026-10-12",
        "eventDate": "2026-10-12",
        "timelineMismatch": False,
        "mismatchSeverity": "none",
        "isRecycledContent": False,
        "ageAnalysis": {
            "contentAge": "6 days old",
            "relevanceToday": "recent",
            "recommendation": "This content describes a recent event.",
        },
    },
}


@pytest.fixture
def valid_payload():
    """A fully schema-conformant engine payload."""
    return copy.deepcopy(VALID_PAYLOAD)


@pytest.fixture
def valid_response_text(valid_payload):
    """Engine text wrapping the valid payload in prose and a code fence."""
    return "Here is my analysis:\n```json\n" + json.dumps(valid_payload) + "\n```\nLet me know if you need more."


@pytest.fixture
def fixed_now():
    return datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_request():
    return {
        "content": "  BREAKING: the harbour bridge is closed and thousands are stranded!  ",
        "sourceUrl": "https://x.example/post/1",
        "platform": "x",
        "mediaUrls": ["https://img.example/1.jpg", "   "],
        "author": {
            "username": "citywatch",
            "displayName": "City Watch",
            "followers": 1200,
            "verified": False,
            "accountAge": "3 years",
        },
    }


@pytest.fixture
def mock_engine():
    """Engine whose generate_content is an AsyncMock."""
    engine = MagicMock()
    engine.generate_content = AsyncMock()
    return engine


@pytest.fixture
def sample_gemini_response(valid_payload):
    """Sample Gemini generateContent API response."""
    return {
        "candidates": [
            {
                "content": {
                    "parts": [
                        {"text": "```json\n"},
                        {"text": json.dumps(valid_payload) + "\n```"},
                    ]
                }
            }
        ]
    }


@pytest.fixture
def mock_httpx_client():
    """Mock httpx.AsyncClient for engine calls."""
    mock_client = MagicMock()
    mock_response = MagicMock()
    mock_response.status_code = 200
    mock_response.raise_for_status = MagicMock()
    mock_client.post = AsyncMock(return_value=mock_response)
    mock_client.__aenter__ = AsyncMock(return_value=mock_client)
    mock_client.__aexit__ = AsyncMock(return_value=False)
    return mock_client
