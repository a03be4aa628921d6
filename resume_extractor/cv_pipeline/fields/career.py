"""Experience and role cascades."""

import re
from typing import Optional, Sequence

from resume_extractor.cv_pipeline.cascade import Strategy
from resume_extractor.utils.helpers import title_case_words

# ---- Experience ----

_NUMBER = r"(\d+(?:\.\d+)?)"
_YEARS = r"\s*(?:years?|yrs?)\b"

_EXPERIENCE_PATTERNS = (
    (
        "labeled",
        re.compile(
            r"(?:total\s*experience|years?\s*of\s*experience|work\s*experience|experience|exp)\s*:?\s*"
            + _NUMBER + _YEARS,
            re.IGNORECASE,
        ),
    ),
    ("years_of_experience", re.compile(_NUMBER + _YEARS + r"\s*(?:of\s*)?(?:experience|exp)", re.IGNORECASE)),
    ("short_label", re.compile(r"(?:experience|exp)\s*:?\s*" + _NUMBER + _YEARS, re.IGNORECASE)),
)


def _experience(pattern: "re.Pattern[str]"):
    def find(text: str, lines: Sequence[str]) -> Optional[str]:
        match = pattern.search(text)
        return f"{match.group(1)} years" if match else None

    return find


EXPERIENCE_STRATEGIES = tuple(Strategy(name, _experience(pattern)) for name, pattern in _EXPERIENCE_PATTERNS)

# ---- Role ----

ROLE_NOUNS = (
    "engineer", "developer", "scientist", "analyst", "manager", "architect",
    "specialist", "consultant", "lead", "senior", "junior", "associate",
)

COMMON_ROLES = (
    "Software Engineer", "Software Developer", "Full Stack Developer",
    "Frontend Developer", "Backend Developer", "Data Scientist",
    "Data Analyst", "ML Engineer", "AI Engineer", "DevOps Engineer",
    "Mobile Developer", "Web Developer", "System Architect",
    "Product Manager", "Project Manager", "Tech Lead", "Senior Engineer",
    "Junior Engineer", "Associate Engineer",
)

# Objective/header zone where a stated role is most likely
HEADER_ZONE_CHARS = 2000
ROLE_SCAN_LINES = 15
ROLE_LINE_KEYWORDS = ("engineer", "developer", "scientist", "analyst", "architect", "manager")

_ROLE_LABEL = r"(?:current\s*role|position|job\s*title|designation|role|title)"
_LABELED_ROLE = re.compile(
    r"\b" + _ROLE_LABEL + r"\s*:?[ \t]*([A-Za-z \t&]+(?:" + "|".join(ROLE_NOUNS) + r"))\b",
    re.IGNORECASE,
)
_ROLE_PHRASE = re.compile(
    r"software\s*engineer|data\s*scientist|full\s*stack|frontend|backend|devops"
    r"|ml\s*engineer|ai\s*engineer|web\s*developer|mobile\s*developer",
    re.IGNORECASE,
)
_SENIORITY_ROLE = re.compile(
    r"(?:senior|junior|lead|principal)\s*(?:software\s*)?(?:engineer|developer|scientist|analyst|architect)",
    re.IGNORECASE,
)
_ALPHA_WORD = re.compile(r"^[A-Za-z]+$")


def labeled_role(text: str, lines: Sequence[str]) -> Optional[str]:
    """Title-cased role after a designation/title label, ending in a role noun."""
    match = _LABELED_ROLE.search(text)
    if not match:
        return None
    role = re.sub(r"\s+", " ", match.group(1)).strip()
    if 3 < len(role) < 50:
        return title_case_words(role)
    return None


def common_role(text: str, lines: Sequence[str]) -> Optional[str]:
    """First well-known job title mentioned in the header zone."""
    header = text[:HEADER_ZONE_CHARS].lower()
    for role in COMMON_ROLES:
        if role.lower() in header:
            return role
    return None


def role_keyword_line(text: str, lines: Sequence[str]) -> Optional[str]:
    """Words of an early line up to (and including) the one naming the role."""
    for line in lines[:ROLE_SCAN_LINES]:
        if not any(keyword in line.lower() for keyword in ROLE_LINE_KEYWORDS):
            continue
        words = []
        for word in line.split():
            if len(word) > 2 and _ALPHA_WORD.match(word):
                words.append(word)
                if any(keyword in word.lower() for keyword in ROLE_LINE_KEYWORDS):
                    break
        if 0 < len(words) < 5:
            return title_case_words(" ".join(words))
    return None


def _phrase(pattern: "re.Pattern[str]"):
    def find(text: str, lines: Sequence[str]) -> Optional[str]:
        match = pattern.search(text)
        if not match:
            return None
        return title_case_words(re.sub(r"\s+", " ", match.group(0)).strip())

    return find


ROLE_STRATEGIES = (
    Strategy("labeled", labeled_role),
    Strategy("common_role", common_role),
    Strategy("keyword_line", role_keyword_line),
    Strategy("role_phrase", _phrase(_ROLE_PHRASE)),
    Strategy("seniority_phrase", _phrase(_SENIORITY_ROLE)),
)
