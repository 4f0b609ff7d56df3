"""Provides application for development purposes."""

from gatekeeper.factory import create_web_app

app = create_web_app()
