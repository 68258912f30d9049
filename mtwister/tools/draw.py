"""Print draws from a seeded MT19937 generator.

Usage:
    python -m mtwister.tools.draw --seed 5489 --count 5
    python -m mtwister.tools.draw --config storage/configs/run.json --kind double
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from mtwister.config.defaults import default_config
from mtwister.config.schema import load_config
from mtwister.runtime import context

_KINDS = ("u32", "double", "int")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print values drawn from an MT19937 generator."
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a GeneratorConfig JSON file. Defaults to default_config().",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed override; takes priority over the config file.",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=10,
        help="Number of values to print.",
    )
    parser.add_argument(
        "--kind",
        choices=_KINDS,
        default="u32",
        help="Value kind: raw 32-bit words, doubles in [0, 1), or non-negative ints.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.config is None:
        config = default_config()
    else:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"ERROR: config not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        config = load_config(config_path)

    source = context.initialize(config, override=args.seed)
    draw = {
        "u32": source.next_u32,
        "double": source.next_double,
        "int": source.next_int,
    }[args.kind]

    for _ in range(args.count):
        print(draw())


if __name__ == "__main__":
    main()
