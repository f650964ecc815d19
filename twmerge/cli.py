from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from .api import classify, merge, remove
from .config import MergeConfig, load_config, load_config_or_default
from .errors import TWUserError
from .tokens import TokenParser
from .version import tool_version


_DASH_EPILOG = (
    "Classes starting with '-' (negative values) read as options; "
    "put '--' after the options to pass them, e.g. twmerge merge -- mt-4 -mt-2"
)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="twmerge",
        description="Merge utility class lists, resolving conflicting classes",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Options shared by all subcommands
    def add_common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--config",
            metavar="PATH",
            help="YAML config file (default: ./twmerge.yaml if present)",
        )
        sp.add_argument("--prefix", help="framework class prefix, e.g. 'tw-'")
        sp.add_argument(
            "--color",
            action="append",
            metavar="NAME",
            help="extra palette name for color detection (repeatable)",
        )
        sp.add_argument(
            "--decompose",
            action="store_true",
            help="split shorthands into longhands instead of dropping them",
        )
        sp.add_argument(
            "--no-merge",
            action="append",
            metavar="NAME",
            help="class name that never conflicts with anything (repeatable)",
        )

    sp_merge = sub.add_parser("merge", help="Merge OVERRIDES into BASE and print the result", epilog=_DASH_EPILOG)
    sp_merge.add_argument("base", help="base class list")
    sp_merge.add_argument("overrides", nargs="?", default="", help="override class list")
    add_common(sp_merge)

    sp_classify = sub.add_parser("classify", help="Group of each token (JSON)", epilog=_DASH_EPILOG)
    sp_classify.add_argument("tokens", nargs="+", help="class tokens")
    add_common(sp_classify)

    sp_parse = sub.add_parser("parse", help="Parsed structure of each token (JSON)", epilog=_DASH_EPILOG)
    sp_parse.add_argument("tokens", nargs="+", help="class tokens")
    add_common(sp_parse)

    sp_remove = sub.add_parser("remove", help="Remove a literal token from a class list", epilog=_DASH_EPILOG)
    sp_remove.add_argument("text", help="class list")
    sp_remove.add_argument("token", help="literal token to drop")
    add_common(sp_remove)

    return p


def _setup_logging() -> None:
    log = logging.getLogger("twmerge")
    level = logging.DEBUG if os.environ.get("TWMERGE_DEBUG") else logging.WARNING
    log.setLevel(level)
    if not log.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        log.addHandler(h)


def _config(ns: argparse.Namespace) -> MergeConfig:
    """File config (explicit --config or ./twmerge.yaml), then CLI flags on top."""
    if ns.config:
        cfg = load_config(ns.config)
    else:
        cfg = load_config_or_default(Path.cwd())

    changes: dict[str, Any] = {}
    if ns.prefix is not None:
        changes["class_prefix"] = ns.prefix
    if ns.color:
        changes["custom_colors"] = tuple(cfg.custom_colors) + tuple(ns.color)
    if ns.decompose:
        changes["decompose"] = True
    if ns.no_merge:
        changes["no_merge"] = frozenset(cfg.no_merge) | frozenset(ns.no_merge)
    return dataclasses.replace(cfg, **changes) if changes else cfg


def _jdumps(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2) + "\n"


def _token_record(parser: TokenParser, text: str) -> dict[str, Any]:
    token = parser.parse(text)
    record = dataclasses.asdict(token)
    record["variants"] = list(token.variants)
    record["variant_key"] = list(token.variant_key)
    return record


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging()

    try:
        cfg = _config(ns)

        if ns.cmd == "merge":
            sys.stdout.write(merge(ns.base, ns.overrides, cfg) + "\n")
            return 0

        if ns.cmd == "classify":
            data = {tok: classify(tok, cfg) for tok in ns.tokens}
            sys.stdout.write(_jdumps(data))
            return 0

        if ns.cmd == "parse":
            parser = TokenParser(cfg.class_prefix)
            sys.stdout.write(_jdumps([_token_record(parser, tok) for tok in ns.tokens]))
            return 0

        if ns.cmd == "remove":
            sys.stdout.write(remove(ns.text, ns.token) + "\n")
            return 0

    except TWUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2
    except ValueError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


__all__ = ["main"]


if __name__ == "__main__":
    raise SystemExit(main())
