"""CLI adapter for ``lib_should_fail`` built on ``lib_cli_exit_tools``.

Purpose
-------
Expose the script expectation helpers on the command line so a snippet can be
checked for the failure it should produce without writing a test module.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command that wires global traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`cli_fail` – raises the deterministic testing failure.
* :func:`cli_check` – runs a script through :func:`lib_should_fail.core.should_fail_script`
  (or the cause variant) and prints the matched exception.
* :func:`cli_describe` – runs a script and prints its exception chain.
* :func:`cli_script_name` – prints fresh generated script names.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
The CLI lives in the outermost layer. It calls the composition root and lets
``lib_cli_exit_tools`` turn unmet expectations into non-zero exit codes.
"""

from __future__ import annotations

import builtins
import sys
from importlib import import_module, metadata
from pathlib import Path
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .application.capture import capture
from .application.chain import describe_chain, describe_error
from .core import DEFAULT_SCRIPT_ENGINE, generic_script_name, should_fail_script, should_fail_with_cause
from .testing import i_should_fail

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

_SCRIPT_PATH = click.Path(path_type=Path, exists=True, file_okay=True, dir_okay=False, readable=True)


def _resolve_version() -> str:
    """Return the installed package version, ``"0.0.0"`` when not installed."""

    try:
        return metadata.version("lib_should_fail")
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Assert that Python code fails the way you expect",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="lib_should_fail",
    message="lib_should_fail version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command configuring traceback handling for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata("lib_should_fail")
    except metadata.PackageNotFoundError:
        click.echo("lib_should_fail (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'lib_should_fail')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("fail", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_fail() -> None:
    """Trigger a deterministic error for testing traceback handling."""

    i_should_fail()


@cli.command("check", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("script", type=_SCRIPT_PATH)
@click.option(
    "--kind",
    default=None,
    help="Expected exception type, e.g. ValueError or json.JSONDecodeError",
)
@click.option(
    "--cause/--no-cause",
    default=False,
    help="Search the causes of the raised exception for --kind instead",
)
def cli_check(script: Path, kind: Optional[str], cause: bool) -> None:
    """Run *script* and require it to fail, printing the matched exception.

    Exits non-zero when the script passes or fails the wrong way.
    """

    source = script.read_text(encoding="utf-8")
    expected = _resolve_kind(kind) if kind else None
    if cause:
        if expected is None:
            raise click.BadParameter("--cause requires --kind", param_hint="--kind")
        matched = should_fail_with_cause(expected, lambda: DEFAULT_SCRIPT_ENGINE.evaluate(source, str(script)))
    else:
        matched = should_fail_script(source, expected)
    click.echo(describe_error(matched))


@cli.command("describe", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("script", type=_SCRIPT_PATH)
def cli_describe(script: Path) -> None:
    """Run *script* and print the causal chain of the exception it raises."""

    source = script.read_text(encoding="utf-8")
    outcome = capture(lambda: DEFAULT_SCRIPT_ENGINE.evaluate(source, str(script)))
    if not outcome.failed:
        click.echo("no exception")
        return
    click.echo(describe_chain(outcome.error, boundary=outcome.boundary), nl=False)


@cli.command("script-name", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--count", type=click.IntRange(min=1), default=1, show_default=True, help="Number of names to print")
def cli_script_name(count: int) -> None:
    """Print freshly generated script names, one per line."""

    for _ in range(count):
        click.echo(generic_script_name())


def _resolve_kind(dotted: str) -> type[BaseException]:
    """Import the exception type named by *dotted*.

    Bare names are looked up in :mod:`builtins`.
    """

    module_name, _, attribute = dotted.rpartition(".")
    try:
        owner = import_module(module_name) if module_name else builtins
        candidate = getattr(owner, attribute)
    except (ImportError, AttributeError) as exc:
        raise click.BadParameter(f"Cannot import exception type {dotted!r}", param_hint="--kind") from exc
    if not (isinstance(candidate, type) and issubclass(candidate, BaseException)):
        raise click.BadParameter(f"{dotted!r} is not an exception type", param_hint="--kind")
    return candidate


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="lib_should_fail",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
