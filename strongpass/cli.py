"""CLI for strongpass: generate passwords and test password strength."""

import argparse
import sys
from getpass import getpass
from typing import List, Optional

from loguru import logger
from rich import print
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import patterns
from .charset import GenerationConfig
from .config import default_generation_config, load_config
from .errors import ConfigError
from .evaluator import MAX_SCORE, ScoreResult, Tier
from .log import configure
from .session import Mode, PyperclipSink, Session, copy_password

TIER_STYLES = {
    Tier.WEAK: "red",
    Tier.FAIR: "yellow",
    Tier.GOOD: "cyan",
    Tier.STRONG: "green",
}


def _tier_markup(result: ScoreResult) -> str:
    style = TIER_STYLES[result.tier]
    return f"[{style}]{result.tier.feedback}[/{style}]"


def _generation_config(args, cfg) -> GenerationConfig:
    """Settings file first, command-line flags on top."""
    merged = dict(cfg)
    if args.length is not None:
        merged["length"] = args.length
    for key, disabled in (
        ("upper", args.no_upper),
        ("lower", args.no_lower),
        ("digits", args.no_digits),
        ("symbols", args.no_symbols),
    ):
        if disabled:
            merged[key] = False
    if args.exclude_ambiguous:
        merged["exclude_ambiguous"] = True
    return default_generation_config(merged)


def cmd_generate(args, cfg) -> int:
    try:
        config = _generation_config(args, cfg)
    except ConfigError as e:
        print(f"[red]{escape(e.user_message)}[/red]")
        return 2

    session = Session(Mode.GENERATE)
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", width=4)
    table.add_column("Password")
    table.add_column("Score", justify="right")
    table.add_column("Strength")
    for i in range(args.copies):
        outcome = session.generate(config)
        if not outcome.ok:
            print(f"[red]Please {escape(outcome.error)}.[/red]")
            return 2
        table.add_row(
            str(i + 1),
            escape(outcome.password),
            f"{outcome.result.score:g}",
            _tier_markup(outcome.result),
        )
    print(table)

    if args.copy:
        # last generated password is the session's current one
        if copy_password(session, PyperclipSink()):
            print("[green]Copied to clipboard.[/green]")
        else:
            print("[yellow]Clipboard unavailable; copy the password manually.[/yellow]")
    return 0


def _detections(pw: str) -> List[str]:
    found = []
    runs = patterns.find_repeated_runs(pw)
    if runs:
        found.append(f"Repeated character run(s): {', '.join(runs)}")
    seqs = patterns.find_sequential_runs(pw)
    if seqs:
        found.append(f"Sequential pattern(s): {', '.join(seqs)}")
    words = patterns.find_common_patterns(pw)
    if words:
        found.append(f"Common word(s): {', '.join(words)}")
    return found


def cmd_test(args, cfg) -> int:
    pw = args.password if args.password is not None else getpass("Password to test (input hidden): ")
    session = Session(Mode.TEST)
    outcome = session.test(pw)
    if outcome.result is None:
        print("[yellow]Enter a password to test its strength.[/yellow]")
        return 1

    result = outcome.result
    header = f"Score: {result.score:g} / {MAX_SCORE:g}"
    print(Panel(_tier_markup(result), title=header))
    detections = _detections(pw)
    if detections:
        print("[bold]Detections:[/bold]")
        for d in detections:
            print(f" • {escape(d)}")
    print("[bold]Suggestions:[/bold]")
    for s in result.suggestions:
        print(f" • {escape(s)}")
    return 0


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n


def _common_options(defaults: bool) -> argparse.ArgumentParser:
    # subcommands use SUPPRESS so they don't overwrite a value given before the subcommand
    default = None if defaults else argparse.SUPPRESS
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", "-c", type=str, default=default, help="Path to a JSON settings file")
    common.add_argument(
        "--verbose", "-v", action="store_true",
        default=False if defaults else argparse.SUPPRESS, help="Debug logging",
    )
    return common


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="strongpass", parents=[_common_options(True)])
    sub = parser.add_subparsers(dest="cmd", required=True)
    sub_common = _common_options(False)

    gen = sub.add_parser("generate", parents=[sub_common], help="Generate one or more passwords")
    gen.add_argument("--length", "-l", type=int, default=None, help="Password length")
    gen.add_argument("--no-upper", action="store_true", help="Disable uppercase")
    gen.add_argument("--no-lower", action="store_true", help="Disable lowercase")
    gen.add_argument("--no-digits", action="store_true", help="Disable digits")
    gen.add_argument("--no-symbols", action="store_true", help="Disable symbols")
    gen.add_argument("--exclude-ambiguous", action="store_true", help="Drop i, l, 1, L, o, 0, O")
    gen.add_argument("--copies", type=_positive_int, default=1, help="How many passwords to generate")
    gen.add_argument("--copy", action="store_true", help="Copy the last password to the clipboard")
    gen.set_defaults(func=cmd_generate)

    t = sub.add_parser("test", parents=[sub_common], help="Score a password and show suggestions")
    t.add_argument("password", nargs="?", default=None, help="Password to test (prompted if omitted)")
    t.set_defaults(func=cmd_test)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # settings warnings go to loguru's stock sink until configure() replaces it
    logger.enable("strongpass")
    cfg = load_config(args.config)
    configure("DEBUG" if args.verbose else cfg["log_level"])
    return args.func(args, cfg)


if __name__ == "__main__":
    sys.exit(main())
