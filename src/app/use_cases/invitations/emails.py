"""
Email comparison for invitations.

Addresses compare case-insensitively unless INVITATION_EMAIL_CASE_SENSITIVE
is set. Use cases take the matcher as a constructor argument so a different
policy can be plugged in.
"""

from typing import Callable, Optional

from config import ApplicationConfig

EmailMatcher = Callable[[str, str], bool]


def case_insensitive_match(invited: str, actual: str) -> bool:
    return invited.strip().lower() == actual.strip().lower()


def exact_match(invited: str, actual: str) -> bool:
    return invited.strip() == actual.strip()


def default_email_matcher() -> EmailMatcher:
    if ApplicationConfig.INVITATION_EMAIL_CASE_SENSITIVE:
        return exact_match
    return case_insensitive_match


def normalize_email(email: str, case_sensitive: Optional[bool] = None) -> str:
    if case_sensitive is None:
        case_sensitive = ApplicationConfig.INVITATION_EMAIL_CASE_SENSITIVE
    email = email.strip()
    return email if case_sensitive else email.lower()
