"""
Command line interface for logrange server configuration.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .core.errors import ConfigError
from .server.config import get_default_config, load_config


def cmd_show(args: argparse.Namespace) -> int:
    """Print the effective configuration."""
    try:
        config = load_config(args.config_file)
    except ConfigError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    print(json.dumps(config.to_dict(), indent=2))
    return 0


def cmd_init(args: argparse.Namespace) -> int:
    """Write the default configuration to a file."""
    config_file = Path(args.path)

    if config_file.exists() and not args.force:
        print(f"{config_file} already exists, use --force to overwrite", file=sys.stderr)
        return 1

    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(
        json.dumps(get_default_config().to_dict(), indent=2),
        encoding="utf-8"
    )
    print(f"Created {config_file}")
    return 0


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="logrange server configuration")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command")

    show_p = subparsers.add_parser("show", help="Print effective configuration")
    show_p.add_argument("--config-file", "-c", default="", help="Override file (JSON)")

    init_p = subparsers.add_parser("init", help="Write default configuration")
    init_p.add_argument("path", help="Config file to create")
    init_p.add_argument("--force", "-f", action="store_true")

    args = parser.parse_args(argv)

    # stdout carries the command output, diagnostics go to stderr
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    commands = {"show": cmd_show, "init": cmd_init}

    if args.command:
        return commands[args.command](args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
