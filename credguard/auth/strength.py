"""
Password Strength Policy
========================

Minimum length and character-class diversity checks applied before a
password reaches the key derivation function.

Characters are classified per Unicode code point:

- lowercase: ``str.islower``
- uppercase: ``str.isupper``
- digit: general category Nd (``str.isdecimal``)
- symbol: anything that is neither a letter (``str.isalpha``) nor a digit

Whitespace and control characters therefore count as symbols.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from credguard.core.config import DEFAULT_PASSWORD_POLICY, PasswordPolicy
from credguard.core.errors import PasswordValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StrengthReport:
    """
    Character-class counts for a candidate password.

    Note: the password itself is never stored on the report.
    """

    length: int
    lowercase: int
    uppercase: int
    digits: int
    symbols: int
    failures: tuple[str, ...] = ()

    @property
    def is_strong(self) -> bool:
        return not self.failures


def evaluate_password(password: str, policy: PasswordPolicy = DEFAULT_PASSWORD_POLICY) -> StrengthReport:
    """
    Count character classes in ``password`` and list unmet requirements.

    Args:
        password: Candidate password
        policy: Thresholds to check against

    Returns:
        StrengthReport with counts and human-readable failures
    """
    lowercase = uppercase = digits = symbols = 0
    for ch in password:
        is_digit = ch.isdecimal()
        if ch.islower():
            lowercase += 1
        if ch.isupper():
            uppercase += 1
        if is_digit:
            digits += 1
        if not (ch.isalpha() or is_digit):
            symbols += 1

    failures = []
    if len(password) < policy.min_length:
        failures.append(f"Password must be at least {policy.min_length} characters")
    if lowercase < policy.min_lowercase:
        failures.append(f"Password must contain at least {policy.min_lowercase} lowercase letter(s)")
    if uppercase < policy.min_uppercase:
        failures.append(f"Password must contain at least {policy.min_uppercase} uppercase letter(s)")
    if digits < policy.min_digits:
        failures.append(f"Password must contain at least {policy.min_digits} digit(s)")
    if symbols < policy.min_symbols:
        failures.append(f"Password must contain at least {policy.min_symbols} symbol(s)")

    return StrengthReport(
        length=len(password),
        lowercase=lowercase,
        uppercase=uppercase,
        digits=digits,
        symbols=symbols,
        failures=tuple(failures),
    )


def is_strong_enough(password: str, policy: PasswordPolicy = DEFAULT_PASSWORD_POLICY) -> bool:
    """
    Check ``password`` against the strength policy.

    Too-short passwords are rejected without scanning. Never raises.
    """
    if len(password) < policy.min_length:
        return False
    return evaluate_password(password, policy).is_strong


def validate_password(password: str, policy: PasswordPolicy = DEFAULT_PASSWORD_POLICY) -> None:
    """
    Validate password meets the strength policy.

    Raises:
        PasswordValidationError: If password is too weak
    """
    report = evaluate_password(password, policy)
    if not report.is_strong:
        logger.debug("Password rejected: %d requirement(s) unmet", len(report.failures))
        raise PasswordValidationError("; ".join(report.failures))
