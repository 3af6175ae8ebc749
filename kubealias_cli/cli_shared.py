from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape


class AliasGenError(Exception):
    pass


class OpError(AliasGenError):
    pass


class OutputClosedError(AliasGenError):
    """Raised when the reader of stdout closes the pipe early."""


RECOGNIZED_SHELLS = frozenset({"bash", "zsh", "fish"})


_ERROR_CONSOLE = Console(stderr=True)


def _rich_error(msg: str) -> None:
    _ERROR_CONSOLE.print(f"[bold red]error:[/bold red] {escape(msg)}")


def _rich_note(msg: str) -> None:
    _ERROR_CONSOLE.print(f"[dim]{escape(msg)}[/dim]")


@dataclass(frozen=True)
class GlobalOpts:
    shell: str = ""
    verbose: bool = False


def shell_header(shell: str) -> str | None:
    # Only exact names get a header; anything else is accepted and ignored.
    if shell in RECOGNIZED_SHELLS:
        return f"# Generated aliases for {shell}"
    return None
