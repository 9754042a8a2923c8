# -*- coding: utf-8 -*-
""" Command line entrypoint. """

import argparse
import importlib
import logging
import sys
from typing import Dict, Iterable, List, NoReturn, Optional, TextIO, Tuple

from .exc import GqlDocError
from .loader import DEFAULT_TIMEOUT, load_schema_json
from .options import (
    DEFAULT_LANGUAGE,
    DEFAULT_LAYOUT,
    DEFAULT_TITLE,
    RenderOptions,
)
from .render import render_schema
from .version import __description__, __title__, __version__

logger = logging.getLogger(__name__)

EPILOG = """\
The schema may be specified as:

  - a URL to the GraphQL endpoint (the introspection query will be run)
  - a GraphQL document containing the schema (.graphql or .gql)
  - a JSON document containing the schema (as returned by the introspection
    query)
  - an importable module or python file exposing the schema as its ``schema``
    attribute (or ``module:attribute``), either an instance of
    py_gql.schema.Schema, an introspection result or a SDL string
"""


def parse_header(value: str) -> Tuple[str, str]:
    """ Split ``name=value``, the value can itself contain ``=``. """
    name, sep, header_value = value.partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(
            'Invalid header "%s", expected name=value' % value
        )
    return name.strip(), header_value


class ArgumentParser(argparse.ArgumentParser):
    """ Exit with status 1 on usage errors. """

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, "%s: error: %s\n" % (self.prog, message))


def build_parser() -> argparse.ArgumentParser:
    parser = ArgumentParser(
        prog=__title__,
        description=__description__,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("schema", help="Schema source")
    parser.add_argument(
        "--language",
        default=DEFAULT_LANGUAGE,
        help="Sets the output language (default: %(default)s)",
    )
    parser.add_argument(
        "--layout",
        default=DEFAULT_LAYOUT,
        help="Sets the layout (default: %(default)s)",
    )
    parser.add_argument(
        "--title",
        dest="title",
        action="append",
        help="Change the top heading title (default: %s)" % DEFAULT_TITLE,
    )
    parser.add_argument(
        "--no-title",
        dest="title",
        action="append_const",
        const=False,
        help="Do not print a title",
    )
    parser.add_argument(
        "--no-toc",
        dest="skip_table_of_contents",
        action="store_true",
        help="Do not print table of contents",
    )
    parser.add_argument(
        "--heading-level",
        type=int,
        default=1,
        help=(
            "Heading level to begin at, useful if you are embedding the "
            "output in a document with other sections (default: %(default)s)"
        ),
    )
    parser.add_argument("--prologue", help="Text to include after the title")
    parser.add_argument(
        "--epilogue", help="Text to include at the end of the document"
    )
    parser.add_argument(
        "--templates",
        dest="templates_dir",
        metavar="DIR",
        help="Use template sets from DIR instead of the bundled ones",
    )
    parser.add_argument(
        "--require",
        action="append",
        default=[],
        metavar="MODULE",
        help="Import this module before loading the schema",
    )
    parser.add_argument(
        "--header",
        action="append",
        type=parse_header,
        default=[],
        metavar="NAME=VALUE",
        help=(
            "Additional header(s) to use in GraphQL request, "
            'e.g. --header "Authorization=Bearer ey..."'
        ),
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="HTTP timeout in seconds (default: %(default)s)",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help="Write to a file instead of stdout",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true")
    verbosity.add_argument("-q", "--quiet", action="store_true")
    parser.add_argument(
        "--version", action="version", version="%(prog)s " + __version__
    )
    return parser


def _configure_logging(verbose: bool, quiet: bool) -> None:
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level, format="%(levelname)s %(name)s: %(message)s"
    )


def _require(modules: Iterable[str]) -> None:
    for name in modules:
        try:
            importlib.import_module(name)
        except Exception as err:
            raise GqlDocError(
                "Could not resolve --require module: %s (%s)" % (name, err)
            ) from err


def main(
    argv: Optional[List[str]] = None, stdout: Optional[TextIO] = None
) -> int:
    """ Run the command line interface.

    Returns:
        Exit code

    Raises:
        SystemExit: On usage errors (status 1), ``--help`` and ``--version``
    """
    args = build_parser().parse_args(argv)
    stdout = stdout if stdout is not None else sys.stdout
    _configure_logging(args.verbose, args.quiet)

    headers = dict(args.header)  # type: Dict[str, str]

    try:
        _require(args.require)
        schema = load_schema_json(
            args.schema, headers=headers, timeout=args.timeout
        )
        options = RenderOptions(
            language=args.language,
            layout=args.layout,
            title=args.title,
            skip_table_of_contents=args.skip_table_of_contents,
            heading_level=args.heading_level,
            prologue=args.prologue,
            epilogue=args.epilogue,
            templates_dir=args.templates_dir,
        )
        document = render_schema(schema, options)
    except GqlDocError as err:
        logger.error("%s", err)
        return 1

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(document)
        except OSError as err:
            logger.error("Could not write %s: %s", args.output, err)
            return 1
        logger.info("Wrote %s", args.output)
    else:
        stdout.write(document)

    return 0


def run() -> None:
    sys.exit(main())
