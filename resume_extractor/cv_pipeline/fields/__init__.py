"""Per-field extraction cascades."""

from .career import EXPERIENCE_STRATEGIES, ROLE_STRATEGIES
from .contact import EMAIL_STRATEGIES, PHONE_STRATEGIES
from .dob import DOB_STRATEGIES
from .links import GITHUB_STRATEGIES, LINKEDIN_STRATEGIES, PORTFOLIO_STRATEGIES
from .location import LOCATION_STRATEGIES
from .name import NAME_STRATEGIES
from .summary import SUMMARY_STRATEGIES

__all__ = [
    "NAME_STRATEGIES",
    "EMAIL_STRATEGIES",
    "PHONE_STRATEGIES",
    "DOB_STRATEGIES",
    "EXPERIENCE_STRATEGIES",
    "ROLE_STRATEGIES",
    "LOCATION_STRATEGIES",
    "LINKEDIN_STRATEGIES",
    "GITHUB_STRATEGIES",
    "PORTFOLIO_STRATEGIES",
    "SUMMARY_STRATEGIES",
]
