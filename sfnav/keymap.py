"""Key bindings and the dispatch table built from them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import partial

from .commands import NavigatorCommands

# command name -> key tokens (see ``keys.read_key`` for named tokens)
DEFAULT_BINDINGS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("quit", ("q",)),
    ("open_selected", ("ENTER",)),
    ("edit_selected", ("e",)),
    ("ascend", ("h", "LEFT", "BACKSPACE")),
    ("descend", ("l", "RIGHT")),
    ("move_up", ("k", "UP")),
    ("move_down", ("j", "DOWN")),
    ("toggle_hidden", ("H",)),
    ("redraw", ("CTRL_L",)),
)


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single action callback."""

    combos: tuple[str, ...]
    handler: Callable[[], bool | None]


class KeyComboRegistry:
    """Small key-dispatch table."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], bool | None]] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> bool | None:
        """Invoke bound handler for ``key``; ``None`` when nothing is bound."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()


def build_key_registry(commands: NavigatorCommands) -> KeyComboRegistry:
    """Bind ``DEFAULT_BINDINGS`` plus ``1``..``N`` view switching to ``commands``."""
    return KeyComboRegistry().register_bindings(
        *(KeyComboBinding(combos, getattr(commands, name)) for name, combos in DEFAULT_BINDINGS),
        *(
            KeyComboBinding((str(index + 1),), partial(commands.switch_view, index))
            for index in range(min(commands.view_set.count, 9))
        ),
    )


__all__ = [
    "DEFAULT_BINDINGS",
    "KeyComboBinding",
    "KeyComboRegistry",
    "build_key_registry",
]
