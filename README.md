# strclient

A small TCP client for a string server. It connects to the server, asks for
a number of strings, and prints each one as it arrives.

## Protocol

1. The client connects to the first IPv4 address found for the host, over TCP.
2. The server sends a string packet. This is the greeting, usually `BEGIN`.
3. The client sends the number of strings it wants. The number is a 4-byte
   big-endian unsigned integer.
4. The server sends that many string packets.
5. The client closes its write side of the connection.
6. The server sends a final string packet. The client reads it and then
   closes the socket.

A string packet is a 2-byte big-endian length followed by that many bytes of
text. The client decodes the text as UTF-8 and replaces any bytes that are
not valid UTF-8.

## Installation

```
pip install .
```

## Usage

```
strclient -h HOST -p PORT [-n COUNT]
```

The same command can also be run as `python -m strclient.cli`.

- `-h HOST` is the server's address. It is required.
- `-p PORT` is the server's port. It is required.
- `-n COUNT` is how many strings to request. The default is 1.

Options may come in any order. If an option is repeated, the last value
wins.

`COUNT` is read from its leading integer. Leading whitespace is skipped and
any text after the number is ignored. The number must fit in a signed 32-bit
integer, and it is then stored as an unsigned 32-bit value, so a negative
count wraps around.

Example:

```
$ strclient -h 127.0.0.1 -p 5000 -n 2
Received "BEGIN"
Sending 2
Received string 1: hello
Received string 2: world
```

The command exits with status 1 in these cases:

- If `-h` or `-p` is missing, it prints `Error: -h is a required command line argument` and/or the matching line for `-p`, one for each missing option.
- If the arguments cannot be parsed, it prints `Error: <reason>`.
- If the conversation with the server fails, it prints `Error: <reason>`.
- If the connection cannot be made, the system's error message is printed to standard error.

The command exits with status 0 on success.

## Library use

```python
import sys
from strclient.options import parse_options
from strclient.cli import run

options = parse_options(["-h", "127.0.0.1", "-p", "5000", "-n", "3"])
strings = run(options, sys.stdout)
```

`parse_options(argv)` takes the arguments without the program name. It
returns an `Options` dataclass with these fields:

- `host`: a string, or `None` if not given
- `port`: a string, or `None` if not given
- `count`: an int, with a default of 1

It raises `ValueError` for unknown options or a bad count.

`run(options, out)` holds one conversation with the server and writes the
report to `out`. It returns the list of strings received between the
greeting and the final packet. `main(argv=None)` runs the whole command and
returns its exit status.

`strclient.protocol` provides the building blocks:

- `connect(host, port)` opens the TCP socket and returns it.
- `send_count(sock, count)` sends the 4-byte count and returns the number of bytes sent. It raises `ValueError` if the count does not fit in 32 bits.
- `recv_exact(sock, n)` receives `n` bytes. It returns fewer if the peer closes the stream first.
- `recv_string(sock)` receives one string packet. It raises `ProtocolError` if the stream ends before the 2-byte length.

Send and receive failures are raised as `ProtocolError`. Connection failures
are raised as `OSError`.

## What it does not do

This package contains only the client. It has no string server. A server
that speaks the protocol above must be running elsewhere before the command
can be used.

## Running the tests

```
pip install .[test]
pytest
```