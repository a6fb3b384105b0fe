"""Entry point: python -m toolbelt"""

from __future__ import annotations

import argparse
import sys

from toolbelt.errors import ToolboxError
from toolbelt.fs_utils import copy_dir_with_pattern
from toolbelt.includes import get_sdk_include_dirs
from toolbelt.logger import logger
from toolbelt.metadata import get_package_name
from toolbelt.sdk import get_sdk_path
from toolbelt.tools import codesign, compile_xib_to_nib
from toolbelt.types import IncludeDirFormat


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="toolbelt", description="Build-support helpers for packaging native apps")
    sub = parser.add_subparsers(dest="command", required=True)

    copy = sub.add_parser("copy", help="Copy files matching a glob pattern")
    copy.add_argument("source")
    copy.add_argument("destination")
    copy.add_argument("pattern", help="e.g. '*.{txt,csv}' or '**/*'")

    incl = sub.add_parser("include-dirs", help="Expand SDK header directory globs")
    incl.add_argument("sdk_root")
    incl.add_argument(
        "patterns", nargs="+", help="Appended to SDK_ROOT as-is; put -- before the positionals if one starts with -"
    )
    incl.add_argument("--clang", action="store_true", help="Prefix every entry with -I")

    xib = sub.add_parser("compile-xibs", help="Compile *.xib files to *.nib with ibtool")
    xib.add_argument("source")
    xib.add_argument("destination")

    sign = sub.add_parser("codesign", help="Ad-hoc sign a package")
    sign.add_argument("package")

    sdk = sub.add_parser("sdk-path", help="Print the SDK path named by an environment variable")
    sdk.add_argument("env_name")

    name = sub.add_parser("name", help="Print the package name")
    name.add_argument("--with-version", action="store_true")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.command == "copy":
            copy_dir_with_pattern(args.source, args.destination, args.pattern)
        elif args.command == "include-dirs":
            fmt = IncludeDirFormat.CLANG if args.clang else IncludeDirFormat.PLAIN
            for entry in get_sdk_include_dirs(args.patterns, args.sdk_root, fmt):
                print(entry)
        elif args.command == "compile-xibs":
            for nib in compile_xib_to_nib(args.source, args.destination):
                print(nib)
        elif args.command == "codesign":
            codesign(args.package)
        elif args.command == "sdk-path":
            print(get_sdk_path(args.env_name))
        elif args.command == "name":
            print(get_package_name(with_version=args.with_version))
    except (ToolboxError, OSError) as e:
        logger.error("Command failed", command=args.command, error=str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
