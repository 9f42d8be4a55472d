"""CLI for passcraft: generate (uniform/pin/memorable/smart), score, config (show/reset)."""

import argparse
import json
from typing import List, Optional

from rich import print
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import DEFAULTS, config_path, load_config, request_from_config, save_config
from .errors import GenerationError
from .evaluator import evaluate_password
from .generator import generate
from .log import configure_logging
from .models import Capitalization, CharClass, Complexity, NumberPosition, PasswordType, WordOrder
from .suggestions import strength_label, suggest_improvements


def _flag(enabled: bool, disabled: bool) -> Optional[bool]:
    """Tri-state from a --x/--no-x pair; None keeps the configured value."""
    if enabled:
        return True
    if disabled:
        return False
    return None


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1 (got {n})")
    return n


def _min_per_class(args) -> Optional[dict]:
    """Configured per-class minimums with any --min-* flags applied; None when no flag is given."""
    given = {
        CharClass.LOWER.value: args.min_lower,
        CharClass.UPPER.value: args.min_upper,
        CharClass.DIGIT.value: args.min_digits,
        CharClass.SYMBOL.value: args.min_symbols,
    }
    given = {k: v for k, v in given.items() if v is not None}
    if not given:
        return None
    minimums = dict(load_config()[PasswordType.UNIFORM.value].get("min_per_class") or {})
    minimums.update(given)
    return minimums


def _request(args):
    ptype = PasswordType(args.type)
    if ptype is PasswordType.UNIFORM:
        return request_from_config(ptype, overrides=dict(
            length=args.length,
            lower=_flag(False, args.no_lower),
            upper=_flag(False, args.no_upper),
            digits=_flag(False, args.no_digits),
            symbols=_flag(False, args.no_symbols),
            custom_symbols=args.symbols,
            exclude_similar=_flag(args.exclude_similar, False),
            exclude_ambiguous=_flag(args.exclude_ambiguous, False),
            min_per_class=_min_per_class(args),
        ))
    if ptype is PasswordType.PIN:
        return request_from_config(ptype, overrides=dict(
            length=args.length,
            exclude_digits=args.exclude,
            no_repeats=_flag(args.no_repeats, False),
            no_sequence=_flag(args.no_sequence, False),
            strict=_flag(args.strict, False),
        ))
    if ptype is PasswordType.MEMORABLE:
        return request_from_config(ptype, overrides=dict(
            word_count=args.words,
            separator=args.separator,
            capitalization=args.capitalization,
            include_numbers=_flag(False, args.no_numbers),
            number_position=args.number_position,
        ))
    return request_from_config(ptype, overrides=dict(
        complexity=args.complexity,
        word_order=args.word_order,
        include_symbols=_flag(False, args.no_symbols),
    ))


def cmd_generate(args):
    request = _request(args)
    for i in range(args.copies):
        pw = generate(request)
        result = evaluate_password(pw, request.password_type)
        label = strength_label(result["score"], request.password_type)
        print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}  [dim]({result['score']}/100 {label})[/dim]")


def cmd_score(args):
    sugg = suggest_improvements(args.password, args.type)
    result = evaluate_password(args.password, args.type)
    header = f"Score: {sugg['score']} / 100 - {sugg['label']}"
    body = (
        f"{sugg['description']}\n"
        f"Length base: {result['base']}\n"
        f"Character classes: {', '.join(result['classes']) or 'none'}"
    )
    print(Panel(body, title=header))
    if result["explanations"]:
        print("[bold]Detections:[/bold]")
        for e in result["explanations"]:
            print(f" • {escape(e)}")
    print("\n[bold]Suggestions:[/bold]")
    for s in sugg["suggestions"]:
        print(f" • {escape(s)}")
    if sugg["examples"]:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column(f"Example {args.type} password")
        for ex in sugg["examples"]:
            table.add_row(escape(ex))
        print(table)


def cmd_config_show(args):
    print(f"[bold]Config file:[/bold] {config_path()}")
    print(escape(json.dumps(load_config(), indent=2)))


def cmd_config_reset(args):
    save_config(DEFAULTS)
    print(f"[green]Reset settings at:[/green] {config_path()}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passcraft")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging on stderr")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--copies", type=_positive_int, default=1, help="How many passwords to generate")
    gen_sub = gen.add_subparsers(dest="type", required=True)

    uni = gen_sub.add_parser(PasswordType.UNIFORM.value, help="Random characters")
    uni.add_argument("--length", type=int, help="Password length (1-128)")
    uni.add_argument("--no-lower", action="store_true", help="Disable lowercase")
    uni.add_argument("--no-upper", action="store_true", help="Disable uppercase")
    uni.add_argument("--no-digits", action="store_true", help="Disable digits")
    uni.add_argument("--no-symbols", action="store_true", help="Disable symbols")
    uni.add_argument("--symbols", type=str, help="Custom symbol set")
    uni.add_argument("--exclude-similar", action="store_true", help="Drop i l 1 L o 0 O")
    uni.add_argument("--exclude-ambiguous", action="store_true", help="Also drop 2 Z 5 S 8 B")
    uni.add_argument("--min-lower", type=int, help="At least this many lowercase letters")
    uni.add_argument("--min-upper", type=int, help="At least this many uppercase letters")
    uni.add_argument("--min-digits", type=int, help="At least this many digits")
    uni.add_argument("--min-symbols", type=int, help="At least this many symbols")

    pin = gen_sub.add_parser(PasswordType.PIN.value, help="Digits only")
    pin.add_argument("--length", type=int, help="PIN length (4-12)")
    pin.add_argument("--exclude", type=str, help="Digits to leave out, e.g. 07")
    pin.add_argument("--no-repeats", action="store_true", help="No identical adjacent digits")
    pin.add_argument("--no-sequence", action="store_true", help="No runs like 1234 or 4321")
    pin.add_argument("--strict", action="store_true", help="Fail instead of returning a best-effort PIN")

    mem = gen_sub.add_parser(PasswordType.MEMORABLE.value, help="Words joined by a separator")
    mem.add_argument("--words", type=int, help="Number of words (2-6)")
    mem.add_argument("--separator", type=str, help="Separator between words")
    mem.add_argument("--capitalization", choices=[c.value for c in Capitalization])
    mem.add_argument("--no-numbers", action="store_true", help="Leave out the 2-digit number")
    mem.add_argument("--number-position", choices=[p.value for p in NumberPosition])

    smart = gen_sub.add_parser(PasswordType.SMART.value, help="Word pattern with number and symbols")
    smart.add_argument("--complexity", choices=[c.value for c in Complexity])
    smart.add_argument("--word-order", choices=[o.value for o in WordOrder])
    smart.add_argument("--no-symbols", action="store_true", help="Leave out symbols")

    for p in (uni, pin, mem, smart):
        p.set_defaults(func=cmd_generate)

    sc = sub.add_parser("score", help="Score a password and show suggestions")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    sc.add_argument("--type", "-t", choices=[t.value for t in PasswordType],
                    default=PasswordType.UNIFORM.value, help="How the password was generated")
    sc.set_defaults(func=cmd_score)

    cfg = sub.add_parser("config", help="Settings file")
    cfg_sub = cfg.add_subparsers(dest="ccmd", required=True)
    cfg_show = cfg_sub.add_parser("show", help="Print effective settings")
    cfg_show.set_defaults(func=cmd_config_show)
    cfg_reset = cfg_sub.add_parser("reset", help="Write default settings")
    cfg_reset.set_defaults(func=cmd_config_reset)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        args.func(args)
    except GenerationError as e:
        print(f"[red]{e.kind}: {escape(str(e))}[/red]")
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
