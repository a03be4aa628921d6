"""Daily birthday report: collect stored candidates, match today's birthdays, send one SMS summary."""

from datetime import date
from typing import Any, Callable, Iterable, List, Mapping, Optional

from pydantic import ValidationError

from resume_extractor.config import BIRTHDAY_TIMEZONE, SMS_RECIPIENT_NUMBER
from resume_extractor.notifications.birthday_matcher import BirthdayMatcher
from resume_extractor.schemas.birthday import BirthdayPerson
from resume_extractor.utils.date_parser import local_today
from resume_extractor.utils.logger import get_logger

logger = get_logger(__name__)

# Notify sink: (recipient, message body) -> provider response (e.g. an SMS client wrapper)
NotifySink = Callable[[str, str], Any]


def _person(data: Mapping[str, Any], source: str) -> Optional[BirthdayPerson]:
    try:
        return BirthdayPerson(
            name=data.get("name") or "Unknown Name",
            phone=data.get("contactNumber") or "No Phone",
            dob=data.get("dateOfBirth") or None,
            source=source,
        )
    except ValidationError as e:
        logger.warning("Skipping malformed %s record: %s", source, e)
        return None


def people_from_records(
    email_records: Iterable[Mapping[str, Any]] = (),
    resume_records: Iterable[Mapping[str, Any]] = (),
) -> List[BirthdayPerson]:
    """
    Normalize stored rows into BirthdayPerson entries.
    Email records keep the profile under 'attachmentData' and only count when
    they carried an attachment; direct uploads keep it at the top level.
    """
    people: List[BirthdayPerson] = []
    for record in email_records:
        if not record.get("hasAttachment"):
            continue
        person = _person(record.get("attachmentData") or {}, "Email")
        if person:
            people.append(person)
    for record in resume_records:
        person = _person(record, "Upload")
        if person:
            people.append(person)
    return people


def find_birthdays(people: Iterable[BirthdayPerson], today: date) -> List[BirthdayPerson]:
    """People whose free-text DOB matches today's day and month."""
    matcher = BirthdayMatcher.for_date(today)
    return [p for p in people if p.dob and matcher.matches(p.dob)]


def format_birthday_report(people: List[BirthdayPerson], today: date) -> str:
    """SMS body: header with the date, then one numbered block per person."""
    lines = [f"Birthday Report ({today.strftime('%d/%m/%Y')}):", ""]
    for index, person in enumerate(people, 1):
        lines.append(f"{index}. {person.name}")
        lines.append(f"   Ph: {person.phone}")
        lines.append(f"   DOB: {person.dob}")
        lines.append("")
    return "\n".join(lines).rstrip() + "\n"


def send_birthday_report(
    people: Iterable[BirthdayPerson],
    notify: NotifySink,
    today: Optional[date] = None,
    recipient: Optional[str] = None,
) -> List[BirthdayPerson]:
    """
    Match today's birthdays and send the summary through the notify sink.
    Nothing is sent when nobody matches. Returns the matched people.
    """
    today = today or local_today(BIRTHDAY_TIMEZONE)
    recipient = recipient or SMS_RECIPIENT_NUMBER
    birthdays = find_birthdays(people, today)
    if not birthdays:
        logger.info("No birthdays found for %s", today.isoformat())
        return []

    logger.info("Found %s birthday(s) for %s", len(birthdays), today.isoformat())
    if not recipient:
        logger.error("SMS_RECIPIENT_NUMBER is not set; cannot send birthday report")
        return birthdays

    body = format_birthday_report(birthdays, today)
    try:
        response = notify(recipient, body)
    except Exception:
        logger.exception("Birthday report delivery failed")
        raise
    logger.info("Birthday report sent to %s: %s", recipient, getattr(response, "sid", response))
    return birthdays
