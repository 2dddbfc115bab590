# src/macaca/cli/main.py
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .. import __version__
from ..config import config
from ..environment import Environment
from ..error_reporter import ErrorReporter
from ..evaluator import Evaluator, is_error
from ..lexer import Lexer
from ..macaca_token import EOF, ILLEGAL
from ..object import Null
from ..parser import parse_source

console = Console()
logger = logging.getLogger("macaca.cli")


def _setup_logging(debug):
    level = logging.DEBUG if debug else logging.getLevelName(config.log_level)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _read_source(file):
    with open(file, 'r', encoding='utf-8') as f:
        return f.read()


def _print_parse_errors(source, filename, errors):
    reporter = ErrorReporter(source, filename)
    console.print("[bold red]Parser Errors:[/bold red]")
    for error in errors:
        console.print(f"[red]{escape(reporter.format_error(error))}[/red]", soft_wrap=True)


def _print_result(result):
    if is_error(result):
        console.print(f"[bold red]ERROR:[/bold red] {escape(result.message)}", soft_wrap=True)
    elif result is not None and not isinstance(result, Null):
        console.print(escape(result.inspect()), soft_wrap=True, highlight=False)


@click.group()
@click.version_option(version=__version__, prog_name="Macaca")
@click.option('--debug', is_flag=True, help="Log evaluator activity to stderr.")
@click.pass_context
def cli(ctx, debug):
    """Macaca Programming Language - a small interpreted language"""
    ctx.obj = {'debug': debug}
    _setup_logging(debug or config.enable_debug_logs)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('--max-steps', type=click.IntRange(min=1), default=None,
              help="Abort evaluation after this many steps.")
@click.option('--stats', is_flag=True, help="Print evaluation counters after running.")
@click.pass_context
def run(ctx, file, max_steps, stats):
    """Run a Macaca program"""
    source = _read_source(file)
    program, errors = parse_source(source, file)

    if errors:
        _print_parse_errors(source, file, errors)
        sys.exit(1)

    kwargs = {} if max_steps is None else {'max_steps': max_steps}
    evaluator = Evaluator(program, Environment(), debug_mode=ctx.obj['debug'], **kwargs)
    try:
        result = evaluator.eval()
    except RecursionError:
        logger.debug("Host stack exhausted while evaluating %s", file)
        console.print("[bold red]Fatal:[/bold red] maximum recursion depth exceeded")
        sys.exit(2)

    _print_result(result)

    if stats:
        table = Table(title="Evaluation")
        table.add_column("Counter", style="cyan")
        table.add_column("Value", style="green", justify="right")
        for name, value in evaluator.summary.items():
            table.add_row(name, str(value))
        console.print(table)

    if is_error(result):
        sys.exit(1)


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def check(file):
    """Check syntax of a Macaca file"""
    source = _read_source(file)
    _, errors = parse_source(source, file)

    if errors:
        console.print("[bold red]Syntax Errors Found:[/bold red]")
        reporter = ErrorReporter(source, file)
        for error in errors:
            console.print(escape(reporter.format_error(error)), soft_wrap=True)
        sys.exit(1)
    console.print("[bold green]Syntax is valid![/bold green]")


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def ast(file):
    """Show the canonical form of a Macaca file"""
    source = _read_source(file)
    program, errors = parse_source(source, file)

    if errors:
        _print_parse_errors(source, file, errors)
        sys.exit(1)

    console.print(Panel.fit(
        escape(str(program)),
        title="[bold blue]Abstract Syntax Tree[/bold blue]",
        border_style="blue",
    ))


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
def tokens(file):
    """Show tokens of a Macaca file"""
    source = _read_source(file)
    lexer = Lexer(source, file)

    table = Table(title="Tokens")
    table.add_column("Type", style="cyan")
    table.add_column("Literal", style="green")
    table.add_column("Line", style="yellow")
    table.add_column("Column", style="yellow")

    illegal = 0
    for token in lexer:
        if token.type == EOF:
            break
        if token.type == ILLEGAL:
            illegal += 1
        table.add_row(token.type, escape(token.literal), str(token.line), str(token.column))

    console.print(table)
    if illegal:
        console.print(f"[yellow]{illegal} illegal token(s)[/yellow]")


@cli.command()
@click.pass_context
def repl(ctx):
    """Start Macaca REPL"""
    env = Environment()
    console.print(f"[bold green]Macaca REPL v{__version__}[/bold green]")
    console.print("Type 'exit' to quit\n")

    while True:
        try:
            code = console.input("[bold blue]>> [/bold blue]")
        except (KeyboardInterrupt, EOFError):
            console.print("\nGoodbye!")
            break

        if code.strip() in ['exit', 'quit']:
            break
        if not code.strip():
            continue

        program, errors = parse_source(code, "<repl>")
        if errors:
            for error in errors:
                console.print(f"[red]Error: {escape(error.message)}[/red]")
            continue

        try:
            result = Evaluator(program, env, debug_mode=ctx.obj['debug']).eval()
        except RecursionError:
            console.print("[red]Error: maximum recursion depth exceeded[/red]")
            continue
        _print_result(result)


if __name__ == "__main__":
    cli()
