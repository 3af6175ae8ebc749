from __future__ import annotations

import sys

import click
import typer
from click.utils import PacifyFlushWrapper

from . import __version__
from .cli_shared import (
    GlobalOpts,
    OpError,
    OutputClosedError,
    _rich_error,
    _rich_note,
    shell_header,
)
from .generator import AliasGenerator
from .vocabulary import default_generator

app = typer.Typer(
    name="kubealias",
    help="Shorthand alias generator for kubectl.",
    no_args_is_help=True,
    add_completion=False,
)


def _click_error_types() -> tuple[type[Exception], ...]:
    # Newer Typer releases raise their own bundled click exceptions, which do
    # not derive from click.ClickException.
    found: list[type[Exception]] = [click.ClickException]
    for cls in typer.BadParameter.__mro__:
        if cls.__name__ == "ClickException" and cls not in found:
            found.append(cls)
    return tuple(found)


_CLICK_ERRORS = _click_error_types()


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"kubealias {__version__}")
        raise typer.Exit(code=0)


@app.callback()
def app_callback(
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True),
) -> None:
    del version


def _write_line(line: str) -> None:
    try:
        sys.stdout.write(line + "\n")
    except BrokenPipeError as e:
        raise OutputClosedError("stdout closed") from e
    except OSError as e:
        raise OpError(f"failed to write aliases: {e}") from e


def write_aliases(generator: AliasGenerator, g: GlobalOpts) -> int:
    header = shell_header(g.shell)
    if header is not None:
        _write_line(header)
    count = 0
    for line in generator.render():
        _write_line(line)
        count += 1
    return count


@app.command(
    "aliases",
    help=(
        "Generate shorthand aliases for kubectl, e.g. 'kubectl get pods' becomes 'kgpo'. "
        "Heavily inspired by https://github.com/ahmetb/kubectl-aliases"
    ),
)
def aliases(
    shell: str = typer.Argument("", help="Target shell; bash, zsh and fish add a header comment"),
    verbose: bool = typer.Option(False, "--verbose", help="Report the alias count on stderr"),
) -> None:
    g = GlobalOpts(shell=shell, verbose=verbose)
    count = write_aliases(default_generator(), g)
    if g.verbose:
        _rich_note(f"generated {count} aliases")


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    try:
        result = app(args=argv, prog_name="kubealias", standalone_mode=False)
        if result is None:
            return 0
        return int(result)
    except typer.Exit as e:
        return int(e.exit_code)
    except _CLICK_ERRORS as e:
        if type(e).__name__ == "NoArgsIsHelpError":
            # Bare invocation: the message is the root help text.
            typer.echo(e.format_message())
        else:
            _rich_error(e.format_message())
        return int(e.exit_code)
    except OutputClosedError:
        # Reader went away (e.g. piped into head); flushing at exit must not raise.
        sys.stdout = PacifyFlushWrapper(sys.stdout)
        return 141
    except OpError as e:
        _rich_error(str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
