"""Per-source link state persistence.

Public re-exports so callers can write::

    from linkwatch.state import StateStore, StateStoreError
"""

from linkwatch.state.store import StateStore, StateStoreError

__all__ = ["StateStore", "StateStoreError"]
