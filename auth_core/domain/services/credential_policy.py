from __future__ import annotations

import re
from dataclasses import dataclass, field


PASSWORD_MIN_LENGTH = 8

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_UPPERCASE_RE = re.compile(r"[A-Z]")
_LOWERCASE_RE = re.compile(r"[a-z]")
_DIGIT_RE = re.compile(r"[0-9]")


@dataclass(frozen=True)
class PasswordValidationResult:
    valid: bool
    errors: list[str] = field(default_factory=list)


def validate_email(candidate: str) -> bool:
    # Apenas formato: sem trim, sem normalizar caixa.
    return _EMAIL_RE.fullmatch(candidate) is not None


def validate_password(candidate: str) -> PasswordValidationResult:
    # Acumula uma mensagem por regra violada, sempre na mesma ordem.
    errors: list[str] = []

    if len(candidate) < PASSWORD_MIN_LENGTH:
        errors.append(f"Password must be at least {PASSWORD_MIN_LENGTH} characters long")
    if not _UPPERCASE_RE.search(candidate):
        errors.append("Password must contain at least one uppercase letter")
    if not _LOWERCASE_RE.search(candidate):
        errors.append("Password must contain at least one lowercase letter")
    if not _DIGIT_RE.search(candidate):
        errors.append("Password must contain at least one number")

    return PasswordValidationResult(valid=not errors, errors=errors)
