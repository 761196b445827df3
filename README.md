# xivalexutil

A small library of helpers for working with game launch arguments, network
address and port ranges, rolling statistics, event listeners and cleanup
actions.

## Installation

```
pip install xivalexutil
```

To run the tests, install the `test` extra and run `pytest`.

## Modules

- `xivalexutil.gameargs` reads and writes game command lines, both the plain
  `key=value` form and the obfuscated `//**sqex0003...**//` form (Blowfish, ECB,
  URL-safe base64).
  - `parse_game_command_line(source, creation_tick=None)` returns a
    `ParsedGameCommandLine` named tuple of `arguments` (a list of `(key, value)`
    pairs) and `obfuscated` (whether the input was in the obfuscated form).
    Decoding the obfuscated form searches the key space; a known process
    creation tick count narrows the first part of that search. A string that
    cannot be decoded raises `ValueError`.
  - `create_game_command_line(pairs, obfuscate, tick=None)` builds a command line
    from `(key, value)` pairs, dropping any `T` entry. When obfuscating, `tick`
    (the current monotonic tick count by default) becomes the `T` value and
    selects the key.
  - `sqex_split` and `sqex_blowfish_modifier` are the lower-level pieces these
    two functions are built on.
  - `GameRegion` lists the known game releases (`INTERNATIONAL`, `KOREAN`,
    `CHINESE`), and the module holds the executable and loader file names as
    constants.
- `xivalexutil.updates`: `parse_release(data)` turns a latest-release JSON
  document (text, bytes or an already parsed mapping) into a frozen
  `VersionInformation` with `name`, `body`, `publish_date` (local time),
  `download_link` and `download_size` taken from the first asset.
  `check_updates(url, timeout=30.0)` fetches `url` and parses it the same way.
- `xivalexutil.addresses`: `parse_ip`, `parse_port`, `parse_ip_range`,
  `parse_port_range`, `compare_sockaddr`, `format_address`, `boundary_check`
  and `clamp`. Ranges come back as inclusive `(start, end)` integer pairs; bad
  input raises `ValueError`, and `boundary_check` raises `IndexError`.
- `xivalexutil.strings`: `split`, `trim` and `replace_all`.
- `xivalexutil.compression`: `zlib_compress`, `zlib_decompress` and
  `describe_return_code`. Failures raise `ZlibError`, which carries the zlib
  return code as `code`.
- `xivalexutil.commandline`: `join_windows_args` quotes and joins arguments into
  one Windows-style command line; `strip_program_name` removes the leading
  program name from a command line.
- `xivalexutil.stats`: `NumericStatisticsTracker` keeps the last `track_count`
  values, optionally letting each expire `max_age` milliseconds after it was
  added, and reports `latest`, `minimum`, `maximum`, `mean`, `median`,
  `deviation`, `next_blank_in` and `len()`. An empty window answers with
  `empty_value`. A custom `clock` can be passed in.
- `xivalexutil.listeners`: `ListenerManager` registers callbacks with `add` (or
  by calling it), returns a `Cleanup` that removes each one again, and calls
  them in registration order with `fire(*args, stop_when=None)`, returning how
  many were notified. `close()` drops every callback.
- `xivalexutil.cleanup`: `Cleanup` holds one action that runs on `clear()` or at
  the end of a `with` block; `ValuedCleanup` also carries a `value`;
  `CleanupStack` collects cleanups and plain callables and runs them in reverse
  order of addition.
- `xivalexutil.loader_actions`: the `LoaderAction` enumeration,
  `loader_action_name` and `parse_loader_action`, which accepts any
  case-insensitive prefix that agrees with an action name.

## Examples

Parse an IP range that also allows the private address ranges:

```python
from xivalexutil.addresses import parse_ip_range

ranges = parse_ip_range("192.0.2.0/24", allow_all=False, allow_private=True, allow_loopback=False)
```

Round-trip a game command line through the obfuscated form:

```python
from xivalexutil.gameargs import create_game_command_line, parse_game_command_line

line = create_game_command_line([("DEV.TestSID", "0"), ("SYS.Region", "3")], obfuscate=True, tick=0x12345678)
parsed = parse_game_command_line(line, creation_tick=0x12345678)
print(parsed.obfuscated, parsed.arguments)
```

Track recent latency samples:

```python
from xivalexutil.stats import NumericStatisticsTracker

tracker = NumericStatisticsTracker(track_count=10, empty_value=-1)
for sample in (30, 40, 50):
    tracker.add_value(sample)
print(tracker.median(), tracker.mean(), len(tracker))
```

## What this package does not do

It is a library only and has no command of its own. It does not start or
restart the game, load anything into a running process, show any window or
tray icon, read the Windows registry, or work out the game's release region
from installed files. It builds and reads the argument strings such tools
need, but starting programs with them is left to the caller.