"""
Message sinks for the console bank.

Business code reports outcomes through a sink instead of printing directly,
so it can be exercised without capturing console output.
"""

from typing import List, Tuple

import click

INPUT = "input"
INFO = "info"
ERROR = "error"
WARNING = "warning"
SUCCESS = "success"

LEVELS = (INPUT, INFO, ERROR, WARNING, SUCCESS)


class MessageSink:
    """Receives leveled, fire-and-forget messages."""

    def emit(self, level: str, text: str) -> None:
        raise NotImplementedError

    def input(self, text: str = "") -> None:
        """Show a prompt; the user types on the same line."""
        self.emit(INPUT, text)

    def info(self, text: str) -> None:
        self.emit(INFO, text)

    def error(self, text: str) -> None:
        self.emit(ERROR, text)

    def warning(self, text: str) -> None:
        self.emit(WARNING, text)

    def success(self, text: str) -> None:
        self.emit(SUCCESS, text)


class ConsoleSink(MessageSink):
    """Writes coloured messages to the terminal with click."""

    STYLES = {
        INPUT: ("{text} >>> ", "cyan"),
        INFO: ("[INFO] {text}", "white"),
        ERROR: ("[ERROR] {text}", "red"),
        WARNING: ("[WARNING] {text}", "yellow"),
        SUCCESS: ("[SUCCESS] {text}", "green"),
    }

    def __init__(self, color: bool = True):
        self.color = color

    def emit(self, level: str, text: str) -> None:
        if level not in self.STYLES:
            raise ValueError(f"Unknown message level: {level}")

        template, fg = self.STYLES[level]
        message = template.format(text=text)
        if self.color:
            message = click.style(message, fg=fg)

        # Prompts stay on the same line as the user's answer
        click.echo(message, nl=level != INPUT)


class RecordingSink(MessageSink):
    """Keeps every message in memory."""

    def __init__(self):
        self.messages: List[Tuple[str, str]] = []

    def emit(self, level: str, text: str) -> None:
        if level not in LEVELS:
            raise ValueError(f"Unknown message level: {level}")
        self.messages.append((level, text))

    def texts(self, level: str) -> List[str]:
        """Return the texts emitted at the given level, in order."""
        return [text for msg_level, text in self.messages if msg_level == level]

    @property
    def last(self) -> Tuple[str, str]:
        return self.messages[-1]

    def clear(self) -> None:
        self.messages.clear()
