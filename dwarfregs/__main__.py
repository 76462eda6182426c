#!/usr/bin/env python3
"""
dwarfregs - Command Line Interface

Usage:
    python3 -m dwarfregs name -a x86_64 7
    python3 -m dwarfregs number -a riscv64 sstatus
    python3 -m dwarfregs list -a arm --format yaml
    python3 -m dwarfregs dump -o registers.yaml
"""

import argparse
import json
import logging
import os
import sys

import yaml

from . import __version__
from .architectures import Architecture
from .catalog import CATALOGS, RegisterCatalog, get_catalog
from .errors import CatalogError


ARCH_ENV_VAR = "DWARFREGS_ARCH"

logger = logging.getLogger(__name__)


def parse_number(text: str) -> int:
    """Parse a register number written in decimal or with a 0x/0o/0b prefix."""
    try:
        number = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid register number: {text!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"register numbers are unsigned: {text!r}")
    return number


def catalog_document(catalog: RegisterCatalog) -> dict:
    """Plain-data form of a catalog, for JSON and YAML output."""
    return {
        "architecture": str(catalog.architecture),
        "reference": catalog.architecture.reference,
        "registers": [
            {"number": reg.number, "name": reg.name, "symbol": reg.symbol}
            for reg in catalog
        ],
    }


def format_document(document, fmt: str) -> str:
    if fmt == "json":
        return json.dumps(document, indent=2) + "\n"
    return yaml.safe_dump(document, sort_keys=False)


def format_listing(catalog: RegisterCatalog) -> str:
    """Human-readable table, one register per line."""
    lines = [f"# {catalog.architecture}: {catalog.architecture.reference}"]
    for reg in catalog:
        lines.append(f"{reg.number:>5}  {reg.name:<16} {reg.symbol}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dwarfregs",
        description="DWARF register number <-> name lookup",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Architectures: {", ".join(str(arch) for arch in Architecture)}
The architecture defaults to ${ARCH_ENV_VAR} when -a is not given.

Examples:
  %(prog)s name -a x86_64 7
  %(prog)s number -a riscv64 x1/ra
  %(prog)s list -a arm --format json
        """,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    arch_parent = argparse.ArgumentParser(add_help=False)
    arch_parent.add_argument(
        "-a",
        "--arch",
        type=str,
        default=os.environ.get(ARCH_ENV_VAR),
        help=f"Architecture (default: ${ARCH_ENV_VAR})",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    name_cmd = commands.add_parser(
        "name", parents=[arch_parent], help="Print the name of a register number"
    )
    name_cmd.add_argument("number", type=parse_number, help="Register number (e.g. 7, 0x1100)")

    number_cmd = commands.add_parser(
        "number", parents=[arch_parent], help="Print the number of a register name"
    )
    number_cmd.add_argument("name", type=str, help="Exact register name (e.g. rsp, x1/ra)")

    list_cmd = commands.add_parser(
        "list", parents=[arch_parent], help="List every register of an architecture"
    )
    list_cmd.add_argument(
        "-f",
        "--format",
        choices=["text", "json", "yaml"],
        default="text",
        help="Output format (default: text)",
    )

    dump_cmd = commands.add_parser("dump", help="Write all catalogs as one document")
    dump_cmd.add_argument(
        "-o",
        "--output",
        type=str,
        help="Output file. If not specified, prints to stdout.",
    )
    dump_cmd.add_argument(
        "-f",
        "--format",
        choices=["json", "yaml"],
        default="yaml",
        help="Output format (default: yaml)",
    )

    return parser


def run(args) -> int:
    """Execute a parsed command. Returns the process exit status."""
    if args.command == "dump":
        document = {
            str(arch): catalog_document(catalog) for arch, catalog in CATALOGS.items()
        }
        text = format_document(document, args.format)
        if args.output:
            with open(args.output, "w") as f:
                f.write(text)
            logger.info("Wrote %d catalogs to %s", len(document), args.output)
        else:
            sys.stdout.write(text)
        return 0

    catalog = get_catalog(args.arch)
    logger.debug("Using %r, numbered per %s", catalog, catalog.architecture.reference)

    if args.command == "name":
        name = catalog.name_for(args.number)
        if name is None:
            print(f"Error: {catalog.architecture} has no register {args.number}", file=sys.stderr)
            return 1
        print(name)
    elif args.command == "number":
        number = catalog.identifier_for(args.name)
        if number is None:
            print(f"Error: {catalog.architecture} has no register named {args.name!r}", file=sys.stderr)
            return 1
        print(number)
    elif args.command == "list":
        if args.format == "text":
            print(format_listing(catalog))
        else:
            sys.stdout.write(format_document(catalog_document(catalog), args.format))
    return 0


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    logging.getLogger(__package__ or "dwarfregs").setLevel(
        logging.DEBUG if args.verbose else logging.WARNING
    )

    if args.command != "dump" and not args.arch:
        parser.error(f"no architecture given: pass -a/--arch or set ${ARCH_ENV_VAR}")

    try:
        status = run(args)
    except CatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
