"""
Access rules for individual user records.

Some records exist but may not be read through the lookup endpoint.
The rules are kept in a table keyed by user id so their scope is
explicit; ids missing from the table are allowed.
"""

from enum import Enum
from typing import Mapping


class AccessRule(str, Enum):
    ALLOWED = "allowed"
    FORBIDDEN = "forbidden"


ACCESS_POLICY: Mapping[str, AccessRule] = {
    "1": AccessRule.FORBIDDEN,
}


def is_access_forbidden(user_id: str, policy: Mapping[str, AccessRule] = ACCESS_POLICY) -> bool:
    """Return ``True`` if ``policy`` denies access to ``user_id``."""
    return policy.get(user_id, AccessRule.ALLOWED) is AccessRule.FORBIDDEN
