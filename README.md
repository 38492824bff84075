# sigtalk

sigtalk sends a text message from one process to another using only POSIX
signals. Each byte of the message is sent most significant bit first:
`SIGUSR1` carries a 0 bit and `SIGUSR2` carries a 1 bit. A zero byte ends the
message, and the receiver prints a newline for it.

It runs on POSIX systems only, because it relies on `SIGUSR1`, `SIGUSR2` and
`signal.pause()`.

## Installing

```
pip install .
```

## Using the commands

Start the receiving side in one terminal. It prints its process id and then
waits for signals until it is interrupted with Ctrl-C:

```
$ sigtalk-server
PID: 12345
```

From another terminal, send a message to that process id:

```
$ sigtalk-client 12345 "hello there"
```

The server prints `hello there` followed by a newline. Text is sent as UTF-8,
and the message stops at its first NUL character, if it has one.

The client takes exactly two arguments. With any other number it prints
`Use: <program> <PID> <Message>` and exits with status 1. The process id is
read like C's `atoi` (leading whitespace and an optional sign, then digits);
if that does not give a positive number the client prints `PID invalid.` and
exits with status 1. If the process cannot be signalled, the client reports
the error on standard error and exits with status 1.

## Using the library

The wire format lives in `sigtalk.protocol`:

```python
from sigtalk.protocol import BitDecoder, encode_char, encode_message

bits = encode_char("A")                   # (0, 1, 0, 0, 0, 0, 0, 1)
decoder = BitDecoder()
for bit in encode_message("hi"):
    byte = decoder.feed(bit)              # a byte once eight bits are in, else None
```

`encode_char` takes a one-character string or an integer code (taken as a
byte). `BitDecoder.feed` raises `ValueError` for anything but 0 or 1.
`BIT_DELAY` is the default pause between bits, 100 microseconds.

`sigtalk.client.send_message(pid, message, delay=BIT_DELAY)` sends a message
and its terminator to a running process; it raises `ValueError` for a
non-positive process id and `OSError` when the signal cannot be delivered.

`sigtalk.server.SignalReceiver(output=None)` decodes incoming signals and
writes each finished byte to a binary stream (standard output by default),
writing a newline for the terminator. `install()` registers its `handle`
method for `SIGUSR1` and `SIGUSR2` and returns the handlers it replaced.

The package also carries small helpers that the commands rely on:

- `sigtalk.chars`: ASCII character classes (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`), `to_upper`, `to_lower`, and the
  integer conversions `atoi` (32-bit wrap-around) and `itoa`.
- `sigtalk.memory`: byte-buffer operations on bytearrays (`memset`, `bzero`,
  `memcpy`, `memmove` with offsets within one buffer, `memchr`, `memcmp`,
  `calloc`).
- `sigtalk.textops`: string helpers that return indices rather than
  pointers (`strchr`, `strrchr`, `strnstr`), comparison (`strncmp`), bounded
  copies returning the text and the attempted length (`strlcpy`, `strlcat`),
  and `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`.
- `sigtalk.fmt`: `format_printf` and `printf`, a minimal formatter handling
  `%c %s %p %d %i %u %x %X %%`, plus `put_char`, `put_str`, `put_endl` and
  `put_nbr`, all writing to standard output unless given a `file`.

## What it does not do

There is no acknowledgement from the receiver: the client sends bits at a
fixed pace and cannot tell whether they arrived. The server decodes a single
stream of bits, so messages from two clients sent at the same time get mixed
together.

## Running the tests

```
pip install .[test]
pytest
```