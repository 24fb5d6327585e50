"""
Crew role extraction and classification.

Crew entries arrive as ``"Name (RoleText)"``. The role text is extracted once
when a credit is loaded and classified into a CrewRole on every aggregation.
"""

import re
from enum import Enum
from typing import Dict

from app.core.exceptions import MalformedCreditEntry


class CrewRole(str, Enum):
    """Closed set of crew role categories used for aggregation."""

    DIRECTOR = "Director"
    WRITER = "Writer"
    SCREENPLAY = "Screenplay"
    EDITOR = "Editor"
    ANIMATION = "Animation"
    OTHER = "Other"


# Canonical spelling -> role, built once. "Other" is the fallback, not a key.
_ROLE_BY_NAME: Dict[str, CrewRole] = {
    role.value: role for role in CrewRole if role is not CrewRole.OTHER
}

# Trailing "(...)" group; the name part may itself contain parentheses.
_ROLE_PATTERN = re.compile(r"^.*?\s*\((?P<role>[^()]*)\)\s*$")


def classify(role_text: str) -> CrewRole:
    """
    Map a role text to its CrewRole.

    Matching is exact and case-sensitive. Anything that is not one of the
    canonical names, including the empty string, is CrewRole.OTHER.
    """
    if not isinstance(role_text, str):
        return CrewRole.OTHER
    return _ROLE_BY_NAME.get(role_text, CrewRole.OTHER)


def extract_role(raw: str) -> str:
    """
    Return the role text of a ``"Name (RoleText)"`` crew entry.

    Raises:
        MalformedCreditEntry: If the entry has no trailing parenthesized role
    """
    match = _ROLE_PATTERN.match(raw) if isinstance(raw, str) else None
    if match is None:
        raise MalformedCreditEntry(raw)
    return match.group("role")
