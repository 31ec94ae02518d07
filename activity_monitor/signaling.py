"""Synchronous publish/subscribe channel."""

from typing import Any, Callable, Generic, TypeVar

from .monitor_logging import get_logger

logger = get_logger()

S = TypeVar("S")
T = TypeVar("T")

Slot = Callable[[Any, Any], None]


class Signal(Generic[S, T]):
    """An event channel bound to a sender.

    Slots are invoked as ``slot(sender, args)`` in connection order.
    """

    def __init__(self, sender: S):
        self._sender = sender
        self._slots: list[Slot] = []

    def connect(self, slot: Slot) -> bool:
        """Connect a slot. Returns False if it was already connected."""
        if slot in self._slots:
            return False
        self._slots.append(slot)
        return True

    def disconnect(self, slot: Slot) -> bool:
        """Disconnect a slot. Returns False if it was not connected."""
        try:
            self._slots.remove(slot)
        except ValueError:
            return False
        return True

    def disconnect_all(self) -> None:
        """Disconnect every slot."""
        self._slots.clear()

    def is_connected(self, slot: Slot) -> bool:
        return slot in self._slots

    def __len__(self) -> int:
        return len(self._slots)

    def emit(self, args: T) -> None:
        """Deliver ``args`` to every connected slot."""
        for slot in list(self._slots):
            # Skip slots disconnected by an earlier slot in this emission
            if slot not in self._slots:
                continue
            try:
                slot(self._sender, args)
            except Exception:
                logger.exception(f"Error in signal slot {slot!r}")
