"""
Pytest fixtures shared by the extraction and notification tests.
"""
import pytest


@pytest.fixture
def sample_resume_text():
    """Typical text-layer output of a one-page PDF resume."""
    return (
        "PRIYA SHARMA\n"
        "Senior Data Scientist\n"
        "Email: priya.sharma@gmail.com | Phone: +91 98765 43210\n"
        "Location: Pune, Maharashtra, India\n"
        "LinkedIn: linkedin.com/in/priyasharma\n"
        "GitHub: priyasharma\n"
        "Portfolio: https://priya.dev\n"
        "Date of Birth: 04/02/1995\n"
        "\n"
        "Summary: Data scientist with a track record of shipping forecasting models to production.\n"
        "Experience: 6 years\n"
        "Acme Analytics - Data Scientist (2019 - Present)\n"
        "Skills: Python, SQL, Spark\n"
        "Education: B.Tech, IIT Bombay\n"
    )


@pytest.fixture
def feb_fourth():
    """(day, month, month_name) for 4 February."""
    return (4, 2, "February")
