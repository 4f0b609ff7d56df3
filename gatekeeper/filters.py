"""Jinja2 template filters."""

from markupsafe import escape

from . import scopes


def scope_label(scope: str) -> str:
    """Get the display name of a scope, or the scope itself if unknown."""
    return escape(scopes.get_display_name(scope) or scope)
