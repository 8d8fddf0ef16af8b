"""Key registration and dispatch.

Reading raw key presses is the event loop's job; this module only maps a
key label to a handler and keeps the help entries shown in the footer.
"""

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class HelpEntry:
    key: str
    label: str


class KeyDispatcher:
    """One handler per key. Registering a key again replaces its entry."""

    def __init__(self) -> None:
        self._handlers: dict[str, tuple[Callable[[], None], HelpEntry]] = {}

    def register(self, key: str, handler: Callable[[], None], help_entry: HelpEntry) -> None:
        self._handlers[key] = (handler, help_entry)

    def unregister(self, key: str) -> None:
        self._handlers.pop(key, None)

    def dispatch(self, key: str) -> bool:
        """Run the handler for ``key``. Returns False if none is registered."""
        entry = self._handlers.get(key)
        if entry is None:
            return False
        handler, _ = entry
        handler()
        return True

    def help_entries(self) -> list[HelpEntry]:
        return [help_entry for _, help_entry in self._handlers.values()]
