"""State/store layer.

This package is the single owner of the client's observable state: the
record set, the loading flag and the error message.
"""

from carinventory.state.store import InventoryState, StateListener, StateStore

__all__ = ["InventoryState", "StateListener", "StateStore"]
