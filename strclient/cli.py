"""Command line client that asks a server for a number of strings."""

from __future__ import annotations

import socket
import sys
from typing import Sequence, TextIO

from .options import Options, parse_options
from .protocol import ProtocolError, connect, recv_string, send_count


def run(options: Options, out: TextIO) -> list[str]:
    """Hold one conversation with the server and report it on ``out``.

    Returns the strings received between the greeting and the closing
    packet.
    """
    received = []
    with connect(options.host, options.port) as sock:
        begin = recv_string(sock)
        print(f'Received "{begin}"', file=out)

        print(f"Sending {options.count}", file=out)
        send_count(sock, options.count)

        for number in range(1, options.count + 1):
            text = recv_string(sock)
            print(f"Received string {number}: {text}", file=out)
            received.append(text)

        sock.shutdown(socket.SHUT_WR)
        recv_string(sock)
    return received


def main(argv: Sequence[str] | None = None) -> int:
    """Run the client; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        options = parse_options(args)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1

    missing = False
    if options.host is None:
        print("Error: -h is a required command line argument")
        missing = True
    if options.port is None:
        print("Error: -p is a required command line argument")
        missing = True
    if missing:
        return 1

    try:
        run(options, sys.stdout)
    except ProtocolError as exc:
        print(f"Error: {exc}")
        return 1
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())