"""
Command line front end for SealBox.

Usage:
    sealbox encrypt --input-path notes.txt --output-path notes.sbx --password "correct horse"
    sealbox decrypt -i notes.sbx -o notes.txt            # prompts for the password
    sealbox info

Exit codes: 0 on success, 1 on any SealBox error (I/O, malformed envelope,
authentication failure), 2 on bad usage, 130 on Ctrl-C.
"""

from __future__ import annotations

import argparse
import getpass
import logging
import sys
from typing import List, Optional

from sealbox import __version__
from sealbox.config import FORMAT
from sealbox.core.exceptions import PasswordError, PasswordMismatchError, SealBoxError
from sealbox.core.sealer import open_file, seal_file

from .logging_config import configure_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def _read_password(args: argparse.Namespace, confirm: bool) -> str:
    if args.password is not None:
        return args.password
    try:
        password = getpass.getpass("Password: ")
        if confirm and getpass.getpass("Confirm password: ") != password:
            raise PasswordMismatchError("passwords do not match")
    except EOFError as exc:
        raise PasswordError("no password given (input closed); pass --password") from exc
    return password


def _cmd_encrypt(args: argparse.Namespace) -> int:
    password = _read_password(args, confirm=True)
    out = seal_file(args.input_path, args.output_path, password)
    print(f"Encryption complete: {out}")
    return EXIT_OK


def _cmd_decrypt(args: argparse.Namespace) -> int:
    password = _read_password(args, confirm=False)
    out = open_file(args.input_path, args.output_path, password)
    print(f"Decryption complete, decrypted file saved at: {out}")
    return EXIT_OK


def _cmd_info(args: argparse.Namespace) -> int:
    print(FORMAT.describe())
    return EXIT_OK


def _add_io_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-i",
        "--input-path",
        required=True,
        metavar="FILE",
        help="File to read",
    )
    parser.add_argument(
        "-o",
        "--output-path",
        required=True,
        metavar="FILE",
        help="File to write (replaced if it exists)",
    )
    parser.add_argument(
        "-p",
        "--password",
        default=None,
        metavar="PASSWORD",
        help="Password (prompted for when omitted)",
    )


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sealbox",
        description="Encrypt and decrypt files with a password (AES-256-GCM, PBKDF2-HMAC-SHA256).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    enc = sub.add_parser("encrypt", help="Seal a file with a password")
    _add_io_arguments(enc)
    enc.set_defaults(handler=_cmd_encrypt)

    dec = sub.add_parser("decrypt", help="Open a sealed file with its password")
    _add_io_arguments(dec)
    dec.set_defaults(handler=_cmd_decrypt)

    info = sub.add_parser("info", help="Show the envelope format and KDF parameters")
    info.set_defaults(handler=_cmd_info)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging(logging.DEBUG)
    elif args.quiet:
        configure_logging(logging.WARNING)
    else:
        configure_logging()

    try:
        return args.handler(args)
    except SealBoxError as exc:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
