"""Main CLI entry point for midiwire."""

from __future__ import annotations

import argparse
import logging
import sys

from .. import __version__
from ..codec import decode, try_decode
from ..exceptions import DecodeError, hex_bytes


def parse_hex(text: str) -> bytes:
    """Parse a hex string such as ``"90 3c 5a"``, ``"90,3c,5a"`` or ``"903c5a"``.

    Raises:
        ValueError: If the text is not valid hex
    """
    cleaned = text.strip().strip("[]").replace(",", " ")
    parts = cleaned.split()
    if len(parts) > 1:
        return bytes(int(part, 16) for part in parts)
    return bytes.fromhex(cleaned)


def decode_messages(messages: list[str], lenient: bool = False) -> int:
    """Decode and print each hex-encoded message.

    Returns:
        Exit code (0 for success, 1 on the first failure in strict mode)
    """
    for text in messages:
        try:
            data = parse_hex(text)
        except ValueError as e:
            print(f"Error: invalid hex {text!r}: {e}", file=sys.stderr)
            return 1

        if lenient:
            message = try_decode(data)
            if message is None:
                print(f"skipped: {hex_bytes(data)}")
            else:
                print(message)
            continue

        try:
            print(decode(data))
        except DecodeError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the midiwire CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="midiwire",
        description="midiwire: Typed MIDI Message Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  midiwire decode "90 3c 5a"              Decode a Note On message
  midiwire decode ff510307a120            Decode a Tempo meta event
  midiwire decode --lenient "e0 00 40"    Skip unsupported messages
  midiwire --version                      Show version
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"midiwire {__version__}",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    decode_parser = subparsers.add_parser(
        "decode",
        help="Decode hex-encoded MIDI messages, one per argument",
    )
    decode_parser.add_argument(
        "messages",
        metavar="HEX",
        nargs="+",
        help="Wire bytes of one message in hex",
    )
    decode_parser.add_argument(
        "--lenient",
        action="store_true",
        help="Skip unsupported or malformed messages instead of failing",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

    if args.command == "decode":
        return decode_messages(args.messages, lenient=args.lenient)

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
