"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from linkwatch.api import create_app
"""

from linkwatch.api.app import create_app

__all__ = ["create_app"]
