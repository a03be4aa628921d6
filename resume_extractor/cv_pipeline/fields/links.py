"""Profile link cascades (LinkedIn, GitHub, portfolio)."""

import re
from typing import Optional, Sequence

from resume_extractor.cv_pipeline.cascade import Strategy, first_group
from resume_extractor.utils.helpers import ensure_scheme

_LINKEDIN_URL = re.compile(r"(?:https?://)?(?:www\.)?linkedin\.com/in/[A-Za-z0-9_-]+", re.IGNORECASE)
_LINKEDIN_LABEL = re.compile(r"\b(?:linkedin|lin)\s*[:\-=]\s*([^\s,]+)", re.IGNORECASE)
_GITHUB_URL = re.compile(r"(?:https?://)?(?:www\.)?github\.com/[A-Za-z0-9_-]+", re.IGNORECASE)
_GITHUB_LABEL = re.compile(r"\b(?:github|git)\s*[:\-=]\s*([^\s,]+)", re.IGNORECASE)
_PORTFOLIO = re.compile(r"\b(?:portfolio|website|personal\s*site|web)\s*[:\-=]?\s*(https?://[^\s,]+)", re.IGNORECASE)

LINKEDIN_PROFILE_BASE = "https://www.linkedin.com/in/"
GITHUB_PROFILE_BASE = "https://github.com/"


def _direct(pattern: "re.Pattern[str]"):
    """Strategy returning the first profile URL in the text, with a scheme."""

    def find(text: str, lines: Sequence[str]) -> Optional[str]:
        match = pattern.search(text)
        return ensure_scheme(match.group(0)) if match else None

    return find


def _labeled(pattern: "re.Pattern[str]", site: str, base_url: str):
    """Label followed by a bare handle: 'github: johndoe' -> https://github.com/johndoe."""

    def find(text: str, lines: Sequence[str]) -> Optional[str]:
        token = first_group(pattern.search(text))
        if not token:
            return None
        if site in token.lower():
            return ensure_scheme(token)
        if len(token) > 3 and "@" not in token and "." not in token:
            return base_url + token.lstrip("/")
        return None

    return find


def portfolio_url(text: str, lines: Sequence[str]) -> Optional[str]:
    """http(s) URL following a portfolio/website label."""
    return first_group(_PORTFOLIO.search(text))


LINKEDIN_STRATEGIES = (
    Strategy("url", _direct(_LINKEDIN_URL)),
    Strategy("labeled", _labeled(_LINKEDIN_LABEL, "linkedin.com", LINKEDIN_PROFILE_BASE)),
)

GITHUB_STRATEGIES = (
    Strategy("url", _direct(_GITHUB_URL)),
    Strategy("labeled", _labeled(_GITHUB_LABEL, "github.com", GITHUB_PROFILE_BASE)),
)

PORTFOLIO_STRATEGIES = (Strategy("labeled_url", portfolio_url),)
