"""Implementation of `memokit config`."""

from __future__ import annotations

import argparse
import sys

import yaml

from memokit.core.config import ConfigError, dump_yaml, resolve_config


def register(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("config", help="Print or write the resolved configuration as YAML")
    parser.add_argument("--config", default=None, help="Config YAML")
    parser.add_argument("--out", default=None, help="Write the resolved config to this file")
    parser.set_defaults(func=cmd_config)


def cmd_config(args: argparse.Namespace) -> int:
    try:
        cfg = resolve_config(args.config)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    if args.out:
        dump_yaml(cfg, args.out)
        print(f"Resolved config written to {args.out}")
    else:
        print(yaml.safe_dump(cfg, sort_keys=False), end="")
    return 0
