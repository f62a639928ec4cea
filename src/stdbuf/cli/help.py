"""Help and version text.

The argument parser built here is used only to *render* usage; the
actual option matching happens in
:mod:`stdbuf.core.option_resolver`, which must be able to stop at the
wrapped command without a ``--`` separator.
"""

from __future__ import annotations

import argparse

from stdbuf.version import __version__

PROG: str = "stdbuf"

DESCRIPTION: str = (
    "Run COMMAND, with modified buffering operations for its standard streams.\n"
    "Mandatory arguments to long options are mandatory for short options too."
)

MODE_EXPLANATION: str = """\
If MODE is 'L' the corresponding stream will be line buffered.
This option is invalid with standard input.

If MODE is '0' the corresponding stream will be unbuffered.

Otherwise MODE is a number which may be followed by one of the following:
KB 1000, K 1024, MB 1000*1000, M 1024*1024, and so on for G, T, P, E, Z, Y.
In this case the corresponding stream will be fully buffered with the buffer
size set to MODE bytes.

NOTE: If COMMAND adjusts the buffering of its standard streams ('tee' does
for example) then that will override corresponding settings changed by
'stdbuf'.  Also some filters (like 'dd' and 'cat' etc.) don't use streams
for I/O, and are thus unaffected by 'stdbuf' settings.
"""


def build_help_parser() -> argparse.ArgumentParser:
    """Construct the parser whose help output documents the CLI."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage="%(prog)s OPTION... COMMAND [ARG]...",
        description=DESCRIPTION,
        epilog=MODE_EXPLANATION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-i",
        "--input",
        metavar="MODE",
        help="adjust standard input stream buffering",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="MODE",
        help="adjust standard output stream buffering",
    )
    parser.add_argument(
        "-e",
        "--error",
        metavar="MODE",
        help="adjust standard error stream buffering",
    )
    parser.add_argument(
        "--help",
        action="store_true",
        help="display this help and exit",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="output version information and exit",
    )
    return parser


def help_text() -> str:
    """Return the full usage text, including the MODE explanation."""
    return build_help_parser().format_help()


def version_text() -> str:
    """Return the one-line version banner."""
    return f"{PROG} version {__version__}"
