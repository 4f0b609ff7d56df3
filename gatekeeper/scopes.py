"""
Human-readable names for identity scopes and claims.

This is a static table, looked up by exact key. An unknown key has no
display information, which is not an error.
"""

from typing import NamedTuple, Optional, Dict


class ScopeDisplay(NamedTuple):
    """Display information for a scope."""

    display_name: str
    description: Optional[str] = None


OPENID = 'openid'
PROFILE = 'profile'
EMAIL = 'email'
ADDRESS = 'address'
PHONE = 'phone'
OFFLINE_ACCESS = 'offline_access'
ROLES = 'roles'
ALL_CLAIMS = 'all_claims'

_SCOPE_DISPLAY: Dict[str, ScopeDisplay] = {
    ADDRESS: ScopeDisplay("Your postal address"),
    ALL_CLAIMS: ScopeDisplay("All user information"),
    EMAIL: ScopeDisplay("Your email address"),
    OFFLINE_ACCESS: ScopeDisplay("Offline access"),
    OPENID: ScopeDisplay("Your user identifier"),
    PHONE: ScopeDisplay("Your phone number"),
    PROFILE: ScopeDisplay("User profile",
                          "Your user profile information (first name, last"
                          " name, etc.)"),
    ROLES: ScopeDisplay("User roles"),
}


def get_display(scope: str) -> Optional[ScopeDisplay]:
    """Get the display information for a scope."""
    return _SCOPE_DISPLAY.get(scope)


def get_display_name(scope: str) -> Optional[str]:
    """Get the human-readable name of a scope, for display to end users."""
    display = get_display(scope)
    return display.display_name if display else None


def get_description(scope: str) -> Optional[str]:
    """Get the longer description of a scope, if it has one."""
    display = get_display(scope)
    return display.description if display else None
