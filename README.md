# sigtalk

sigtalk passes a text message from one process to another using only the two
user signals. Each byte is sent as eight signals, most significant bit first.
`SIGUSR1` carries a 1 and `SIGUSR2` carries a 0. A zero byte ends the message.
When the receiver gets that zero byte, it writes a newline. Text is sent as
UTF-8, and the receiver writes the bytes to standard output as they arrive.

These signals exist only on POSIX systems, so both ends must run on one.

## Install

```
pip install .
```

## Usage

Start the receiver in one terminal. It prints its process id and then waits
for messages until it is stopped:

```
sigtalk-server
```

In a second terminal, send a message to that process id:

```
sigtalk-client <PID> "hello there"
```

The receiver writes `hello there` followed by a newline. It keeps running, so
you can send more messages to it.

The client takes exactly two arguments. With any other number it prints
`Error: Usage: <program> <PID> <message>` and exits with status 1. The PID is
read the way C's `atoi` reads a number: leading whitespace and one optional
sign are allowed, and reading stops at the first non-digit. After each signal
the client pauses for `sigtalk.client.DEFAULT_DELAY` seconds (0.0007), so the
receiver can handle one signal before the next arrives.

## Library

- `sigtalk.protocol`
  - `encode_byte(value)` returns the eight signal numbers for one byte.
  - `encode_message(message)` yields the signals for a whole message and its
    terminating zero byte.
  - `Decoder.feed(signum)` takes one signal at a time. It returns the byte once
    eight bits are in, and `None` until then. Any signal other than `SIGUSR1`
    counts as a 0 bit.
- `sigtalk.client`
  - `send_message(pid, message, delay, kill)` signals a message to a process.
    `kill` defaults to `os.kill`. Pass your own function to record the signals
    instead of sending them.
  - `main(argv)` is the entry point of the `sigtalk-client` command.
- `sigtalk.server`
  - `Server` decodes signals through `handle(signum, frame)`. It writes each
    finished byte to its `stream`, which is standard output by default, and
    writes a zero byte as a newline.
  - `Server.install()` registers `handle` for both user signals.
  - `main(argv)` is the entry point of the `sigtalk-server` command.
- `sigtalk.printf`
  - `format(fmt, *args)` and `printf(fmt, *args, stream=None)` support the
    conversions `%c %s %d %i %u %x %X %p %%`. Integers wrap to 32 bits.
  - `put_char`, `put_str`, `put_endl` and `put_nbr` write single values to a
    stream.
- `sigtalk.text` holds C-style string and character helpers:
  - parsing and formatting numbers: `atoi`, `itoa`
  - working with strings: `split`, `strtrim`, `substr`
  - searching and comparing: `strnstr`, `strncmp`, `find_char`, `rfind_char`
  - classifying characters: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
    `is_print`
  - changing case: `to_upper`, `to_lower`

## What it does not do

- The receiver never answers. The client cannot tell whether a message
  arrived.
- Timing is the only flow control. If signals come in faster than the
  receiver handles them, bits can be lost and the rest of the message comes
  out garbled.
- If two clients send to the same receiver at the same time, their bits mix
  together.

## Tests

```
pip install .[test]
pytest
```