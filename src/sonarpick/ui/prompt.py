"""Checkbox list prompt rendered with Rich.

Keys: up/down (or k/j) move, page up/down and home/end jump, space toggles the
current row, ``a`` checks every row, ``n`` clears them all, ``i`` inverts,
enter confirms and ``q``/Esc/Ctrl+C cancel without a result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

import readchar
from rich.console import Console, Group
from rich.live import Live
from rich.text import Text

from sonarpick.domain.ports.prompting import SelectionAborted, SelectionPrompt

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from sonarpick.domain.colors import TaggedLabel
    from sonarpick.domain.model import Choice

DEFAULT_PAGE_SIZE = 15

CONFIRM_KEYS = frozenset({readchar.key.ENTER, "\r", "\n"})
ABORT_KEYS = frozenset({"q", readchar.key.ESC, getattr(readchar.key, "CTRL_C", "\x03"), "\x03"})
TOGGLE_KEYS = frozenset({readchar.key.SPACE, " "})


class KeyAction(Enum):
    CONTINUE = auto()
    CONFIRM = auto()
    ABORT = auto()


@dataclass(slots=True)
class CheckboxState:
    choices: tuple[Choice, ...]
    checked: set[str] = field(default_factory=set)
    cursor: int = 0
    offset: int = 0
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def from_choices(
        cls, choices: Iterable[Choice], *, page_size: int = DEFAULT_PAGE_SIZE
    ) -> CheckboxState:
        items = tuple(choices)
        return cls(
            choices=items,
            checked={choice.key for choice in items if choice.preselected},
            page_size=max(1, page_size),
        )

    def move(self, delta: int, *, wrap: bool = True) -> None:
        if not self.choices:
            return
        target = self.cursor + delta
        if wrap:
            target %= len(self.choices)
        self.jump(target)

    def jump(self, index: int) -> None:
        if not self.choices:
            return
        self.cursor = max(0, min(index, len(self.choices) - 1))
        if self.cursor < self.offset:
            self.offset = self.cursor
        elif self.cursor >= self.offset + self.page_size:
            self.offset = self.cursor - self.page_size + 1

    def toggle(self) -> None:
        if not self.choices:
            return
        key = self.choices[self.cursor].key
        if key in self.checked:
            self.checked.discard(key)
        else:
            self.checked.add(key)

    def select_all(self) -> None:
        self.checked = {choice.key for choice in self.choices}

    def select_none(self) -> None:
        self.checked.clear()

    def invert(self) -> None:
        self.checked = {choice.key for choice in self.choices} - self.checked

    def window(self) -> range:
        return range(self.offset, min(self.offset + self.page_size, len(self.choices)))

    def checked_keys(self) -> frozenset[str]:
        return frozenset(self.checked)


def handle_key(state: CheckboxState, key: str) -> KeyAction:
    if key in CONFIRM_KEYS:
        return KeyAction.CONFIRM
    if key in ABORT_KEYS:
        return KeyAction.ABORT

    if key in (readchar.key.UP, "k"):
        state.move(-1)
    elif key in (readchar.key.DOWN, "j"):
        state.move(1)
    elif key == readchar.key.PAGE_UP:
        state.move(-state.page_size, wrap=False)
    elif key == readchar.key.PAGE_DOWN:
        state.move(state.page_size, wrap=False)
    elif key == readchar.key.HOME:
        state.jump(0)
    elif key == readchar.key.END:
        state.jump(len(state.choices) - 1)
    elif key in TOGGLE_KEYS:
        state.toggle()
    elif key == "a":
        state.select_all()
    elif key == "n":
        state.select_none()
    elif key == "i":
        state.invert()
    return KeyAction.CONTINUE


def label_text(label: TaggedLabel) -> Text:
    return Text(label.text, style=label.color.terminal_name if label.color else "")


def render(state: CheckboxState, message: str) -> Group:
    lines: list[Text] = [Text(message, style="bold")]
    for index in state.window():
        choice = state.choices[index]
        is_checked = choice.key in state.checked
        lines.append(
            Text.assemble(
                ("❯ " if index == state.cursor else "  ", "cyan"),
                ("◉ " if is_checked else "◯ ", "green" if is_checked else "dim"),
                label_text(choice.label),
            )
        )
    hidden = len(state.choices) - len(state.window())
    position = f" · rows {state.offset + 1}-{state.window().stop} of {len(state.choices)}"
    lines.append(
        Text(
            f"{len(state.checked)}/{len(state.choices)} selected"
            f"{position if hidden else ''}"
            " · space toggle · a all · n none · i invert · enter confirm · q cancel",
            style="dim",
        )
    )
    return Group(*lines)


def _read_key() -> str:
    return readchar.readkey()


@dataclass(slots=True)
class CheckboxPrompt:
    page_size: int = DEFAULT_PAGE_SIZE
    console: Console = field(default_factory=lambda: Console(highlight=False))
    read_key: Callable[[], str] = field(default=_read_key)

    def __call__(self, choices: Sequence[Choice], *, message: str) -> frozenset[str]:
        state = CheckboxState.from_choices(choices, page_size=self.page_size)
        with Live(
            render(state, message),
            console=self.console,
            auto_refresh=False,
            transient=True,
        ) as live:
            while True:
                try:
                    key = self.read_key()
                except (KeyboardInterrupt, EOFError) as exc:
                    raise SelectionAborted("Selection cancelled") from exc

                action = handle_key(state, key)
                if action is KeyAction.ABORT:
                    raise SelectionAborted("Selection cancelled")
                if action is KeyAction.CONFIRM:
                    break
                live.update(render(state, message), refresh=True)

        return state.checked_keys()


if TYPE_CHECKING:
    _prompt_check: SelectionPrompt = CheckboxPrompt()
