"""Mini README: Client-facing interfaces for Pocket Ledger.

Exports the FastAPI application factory serving the JSON API used by
browser or desktop front ends.
"""

from .web_app import create_application

__all__ = ["create_application"]
