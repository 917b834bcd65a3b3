"""Command line interface for the MkDocs to BookMap converter."""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from .converter import DEFAULT_OUTPUT_NAME, BookmapConverter, ConversionError, ConversionOptions
from . import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mkdocs-bookmap",
        description=(
            "Convert the pages navigation of an mkdocs.yml file into a DITA "
            "BookMap written to <dir>/document.ditamap."
        ),
    )
    parser.add_argument("--dir", dest="target_dir", help="Directory holding the Markdown topics")
    parser.add_argument("--file", dest="source_file", help="Navigation file to convert (mkdocs.yml)")
    parser.add_argument(
        "--output-name",
        default=DEFAULT_OUTPUT_NAME,
        help="File name of the generated map inside --dir",
    )
    parser.add_argument("--encoding", default="utf-8", help="Encoding of the navigation file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only print warnings and errors")
    parser.add_argument("--version", action="version", version=f"mkdocs-bookmap {__version__}")
    return parser


def configure_logging(verbose: bool, quiet: bool) -> None:
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def create_options(namespace: argparse.Namespace) -> ConversionOptions:
    return ConversionOptions.from_parameters(
        dir=namespace.target_dir,
        file=namespace.source_file,
        output_name=namespace.output_name,
        encoding=namespace.encoding,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose, args.quiet)
    try:
        options = create_options(args)
        result = BookmapConverter().convert(options)
    except ConversionError as exc:
        logging.getLogger(__name__).error(str(exc))
        return 1

    if result.renamed is not None:
        print(f"Renamed {result.renamed.source} to {result.renamed.target}")
    print(
        f"Wrote {result.chapter_count} chapters and {result.topic_count} topics "
        f"to {result.output_path}"
    )
    print(f"Elapsed: {result.elapsed_seconds:.2f}s")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
