"""Game launch arguments: the plain form and the obfuscated ``sqex0003`` form."""

from __future__ import annotations

import base64
import binascii
import time
from enum import Enum
from typing import Iterable, Iterator, NamedTuple, Optional

from Crypto.Cipher import Blowfish

from .commandline import join_windows_args
from .strings import replace_all

SQEX_CHECKSUM_TABLE = "fX1pGtdS5CAP4_VL"

_PREFIX = "//**sqex0003"
_SUFFIX = "**//"

GAME_EXECUTABLE_32_NAME = "ffxiv.exe"
GAME_EXECUTABLE_64_NAME = "ffxiv_dx11.exe"
LOADER_32_NAME = "XivAlexanderLoader32.exe"
LOADER_64_NAME = "XivAlexanderLoader64.exe"
DLL_32_NAME = "XivAlexander32.dll"
DLL_64_NAME = "XivAlexander64.dll"


class GameRegion(Enum):
    INTERNATIONAL = "international"
    KOREAN = "korean"
    CHINESE = "chinese"


class ParsedGameCommandLine(NamedTuple):
    arguments: list[tuple[str, str]]
    obfuscated: bool


def _tick_count() -> int:
    return (time.monotonic_ns() // 1_000_000) & 0xFFFFFFFF


def sqex_blowfish_modifier(data: bytes) -> bytes:
    """Reverse the byte order of every 4-byte word of ``data``."""
    data = bytes(data)
    if len(data) % 4:
        raise ValueError("string length % 4 != 0")
    return b"".join(data[pos:pos + 4][::-1] for pos in range(0, len(data), 4))


def sqex_split(source: str, delim: str, max_count: Optional[int] = None) -> list[str]:
    """Split on ``delim`` where it follows an odd run of spaces.

    Leading spaces are skipped. Only the first ``max_count`` delimiters
    split (all of them when ``max_count`` is None). Each piece loses its
    leading delimiter and one trailing space.
    """
    pieces = [""]
    begun = False
    for ch in source:
        if ch != " ":
            begun = True
        elif not begun:
            continue
        if ch == delim:
            pieces.append(ch)
        else:
            pieces[-1] += ch

    i = 1
    while i < len(pieces):
        previous = pieces[i - 1]
        stripped = previous.rstrip(" ")
        trailing = len(previous) - len(stripped)
        if (max_count is not None and i > max_count) or not stripped or trailing % 2 == 0:
            pieces[i - 1] = previous + pieces.pop(i)
        else:
            i += 1

    result = []
    for piece in pieces:
        start = 1 if piece.startswith(delim) else 0
        stop = len(piece) - 1 if piece.endswith(" ") else len(piece)
        result.append(piece[start:stop])
    return result


def _split_windows_args(line: str) -> list[str]:
    """Split a command line the way the Windows shell does for arguments."""
    args: list[str] = []
    i, n = 0, len(line)
    while True:
        while i < n and line[i] in " \t":
            i += 1
        if i >= n:
            return args
        current: list[str] = []
        in_quote = False
        while i < n:
            ch = line[i]
            if ch == "\\":
                j = i
                while j < n and line[j] == "\\":
                    j += 1
                count = j - i
                if j < n and line[j] == '"':
                    current.append("\\" * (count // 2))
                    if count % 2:
                        current.append('"')
                        i = j + 1
                    else:
                        i = j
                else:
                    current.append("\\" * count)
                    i = j
                continue
            if ch == '"':
                if in_quote and i + 1 < n and line[i + 1] == '"':
                    current.append('"')
                    i += 2
                    continue
                in_quote = not in_quote
                i += 1
                continue
            if ch in " \t" and not in_quote:
                break
            current.append(ch)
            i += 1
        args.append("".join(current))


def _b64url_decode(text: str) -> bytes:
    stripped = text.rstrip("=")
    try:
        return base64.urlsafe_b64decode(stripped + "=" * (-len(stripped) % 4))
    except binascii.Error as e:
        raise ValueError("bad encoded string") from e


def _candidate_keys(checksum: int, creation_tick: Optional[int]) -> Iterator[bytes]:
    searches = []
    if creation_tick is not None:
        searches.append(((checksum << 16) | (creation_tick & 0xFF000000), 16))
    searches.append((checksum << 16, 0xFFF))
    for start, count in searches:
        for step in range(count - 1):
            yield f"{(start + step * 0x100000) & 0xFFFF0000:08x}".encode("ascii")


def _parse_obfuscated(source: str, creation_tick: Optional[int]) -> list[tuple[str, str]]:
    checksum = SQEX_CHECKSUM_TABLE.find(source[-5])
    if checksum < 0:
        raise ValueError("bad encoded string")
    encrypted = sqex_blowfish_modifier(_b64url_decode(source[len(_PREFIX):-5]))
    if len(encrypted) % 8:
        raise ValueError("bad encoded string")

    for key in _candidate_keys(checksum, creation_tick):
        decrypted = Blowfish.new(key, Blowfish.MODE_ECB).decrypt(encrypted)
        if not (decrypted.startswith(b"= T ") or decrypted.startswith(b" T/ ")):
            continue
        plain = sqex_blowfish_modifier(decrypted).rstrip(b"\0").decode("utf-8", errors="replace")
        pairs = []
        for item in sqex_split(plain, "/", None):
            key_value = sqex_split(item, "=", 1)
            name = replace_all(key_value[0], "  ", " ")
            value = replace_all(key_value[1], "  ", " ") if len(key_value) > 1 else ""
            pairs.append((name, value))
        return pairs
    raise ValueError("bad encoded string")


def parse_game_command_line(source: str, creation_tick: Optional[int] = None) -> ParsedGameCommandLine:
    """Parse game arguments into ``(key, value)`` pairs.

    The obfuscated form is decrypted by searching the key space; a known
    process creation tick count narrows the first part of the search.
    """
    if source.startswith(_PREFIX) and source.endswith(_SUFFIX) and len(source) >= 17:
        return ParsedGameCommandLine(_parse_obfuscated(source, creation_tick), True)

    pairs = []
    for arg in _split_windows_args(source):
        name, sep, value = arg.partition("=")
        pairs.append((name, value) if sep else (arg, ""))
    return ParsedGameCommandLine(pairs, False)


def create_game_command_line(
    pairs: Iterable[tuple[str, str]], obfuscate: bool, tick: Optional[int] = None
) -> str:
    """Build game arguments from ``pairs``; any ``T`` entry is dropped.

    When obfuscating, ``tick`` (the current tick count by default) becomes
    the ``T`` value and selects the encryption key.
    """
    if not obfuscate:
        return join_windows_args(f"{k}={v}" for k, v in pairs if k != "T")

    if tick is None:
        tick = _tick_count()
    tick &= 0xFFFFFFFF
    key = f"{tick & 0xFFFF0000:08x}".encode("ascii")
    checksum = SQEX_CHECKSUM_TABLE[(tick >> 16) & 0xF]

    plain = f" T ={tick}" + "".join(
        f" /{replace_all(k, ' ', '  ')} ={replace_all(v, ' ', '  ')}"
        for k, v in pairs
        if k != "T"
    )
    data = plain.encode("utf-8")
    data += b"\0" * (-len(data) % 8)
    encrypted = sqex_blowfish_modifier(
        Blowfish.new(key, Blowfish.MODE_ECB).encrypt(sqex_blowfish_modifier(data))
    )
    encoded = base64.urlsafe_b64encode(encrypted).decode("ascii").rstrip("=")
    return f"{_PREFIX}{encoded}{checksum}{_SUFFIX}"