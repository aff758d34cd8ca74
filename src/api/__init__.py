"""HTTP API for the claim tracker."""

from .app import create_app

__all__ = ["create_app"]
