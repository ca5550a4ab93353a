"""Password generation and strength scoring for the password manager."""

import re
import secrets
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List

UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
NUMBERS = "0123456789"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"
SIMILAR = "il1Lo0O"
AMBIGUOUS = "{}[]()/\\'\"`~,;.<>"

MIN_LENGTH = 4
MAX_LENGTH = 128
MAX_SCORE = 6


@dataclass
class GeneratorConfig:
    length: int = 16
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_similar: bool = False
    exclude_ambiguous: bool = False


@dataclass
class PasswordStrength:
    score: int
    label: str
    feedback: List[str] = field(default_factory=list)
    max_score: int = MAX_SCORE

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def build_charset(config: GeneratorConfig) -> str:
    charset = ""
    if config.include_uppercase:
        charset += UPPERCASE
    if config.include_lowercase:
        charset += LOWERCASE
    if config.include_numbers:
        charset += NUMBERS
    if config.include_symbols:
        charset += SYMBOLS
    if config.exclude_similar:
        charset = "".join(c for c in charset if c not in SIMILAR)
    if config.exclude_ambiguous:
        charset = "".join(c for c in charset if c not in AMBIGUOUS)
    return charset


def generate_password(config: GeneratorConfig = None) -> str:
    """Draw a random password from the configured character classes."""
    config = config or GeneratorConfig()
    if not MIN_LENGTH <= config.length <= MAX_LENGTH:
        raise ValueError(f"length must be between {MIN_LENGTH} and {MAX_LENGTH}")

    charset = build_charset(config)
    if not charset:
        raise ValueError("at least one character class must be enabled")

    return "".join(secrets.choice(charset) for _ in range(config.length))


def evaluate_strength(password: str) -> PasswordStrength:
    """Score a password from 0 to 6 and list what it is missing."""
    score = 0
    feedback = []

    if len(password) < 8:
        feedback.append("use at least 8 characters")
    elif len(password) >= 12:
        score += 1

    if re.search(r"[a-z]", password):
        score += 1
    else:
        feedback.append("add lowercase letters")

    if re.search(r"[A-Z]", password):
        score += 1
    else:
        feedback.append("add uppercase letters")

    if re.search(r"[0-9]", password):
        score += 1
    else:
        feedback.append("add numbers")

    if re.search(r"[^A-Za-z0-9]", password):
        score += 1
    else:
        feedback.append("add special characters")

    if len(password) >= 16:
        score += 1

    if score >= 4:
        label = "strong"
    elif score >= 3:
        label = "medium"
    else:
        label = "weak"

    return PasswordStrength(score=score, label=label, feedback=feedback)
