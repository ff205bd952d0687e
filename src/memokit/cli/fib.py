"""Implementation of `memokit fib`."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from memokit.core.config import STRATEGIES, ConfigError, resolve_config
from memokit.core.versioning import package_versions
from memokit.sequences.fibonacci import InvalidArgument, make_fibonacci
from memokit.utils.hash import mapping_sha256

logger = logging.getLogger(__name__)


def register(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("fib", help="Compute Fibonacci numbers with a shared cache")
    parser.add_argument("indices", nargs="+", type=int, help="Non-negative Fibonacci indices")
    parser.add_argument("--config", default=None, help="Config YAML")
    parser.add_argument("--strategy", choices=STRATEGIES, default=None, help="Override fibonacci.strategy")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.set_defaults(func=cmd_fib)


def cmd_fib(args: argparse.Namespace) -> int:
    overrides = {"fibonacci": {"strategy": args.strategy}} if args.strategy else None
    try:
        cfg = resolve_config(args.config, overrides=overrides)
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    fib = make_fibonacci(
        thread_safe=cfg["cache"]["thread_safe"],
        strategy=cfg["fibonacci"]["strategy"],
    )
    try:
        values = {n: fib(n) for n in args.indices}
    except InvalidArgument as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    info = fib.cache_info()
    logger.debug("Cache after run: %s", info)

    if args.json:
        payload = {
            "values": {str(n): v for n, v in values.items()},
            "cache": info._asdict(),
            "config": cfg,
            "config_sha256": mapping_sha256(cfg),
            "versions": package_versions(),
        }
        print(json.dumps(payload, indent=2, sort_keys=True))
    else:
        for n, v in values.items():
            print(f"F({n}) = {v}")
    return 0
