"""zlib stream compression with errors named after zlib return codes."""

from __future__ import annotations

import os
import zlib

Z_OK = 0
Z_STREAM_END = 1
Z_NEED_DICT = 2
Z_ERRNO = -1
Z_STREAM_ERROR = -2
Z_DATA_ERROR = -3
Z_MEM_ERROR = -4
Z_BUF_ERROR = -5
Z_VERSION_ERROR = -6

_DESCRIPTIONS = {
    Z_OK: "OK",
    Z_STREAM_END: "Stream end",
    Z_NEED_DICT: "Need dict",
    Z_STREAM_ERROR: "Stream error",
    Z_DATA_ERROR: "Data error",
    Z_MEM_ERROR: "Memory error",
    Z_BUF_ERROR: "Buffer error",
    Z_VERSION_ERROR: "Version error",
}


def describe_return_code(code: int) -> str:
    """Human-readable text for a zlib return code."""
    if code == Z_ERRNO:
        return os.strerror(code)
    try:
        return _DESCRIPTIONS[code]
    except KeyError:
        return f"Unknown return code {code}"


class ZlibError(RuntimeError):
    """A zlib operation failed with the given return code."""

    def __init__(self, code: int) -> None:
        super().__init__(describe_return_code(code))
        self.code = code


def zlib_compress(data: bytes) -> bytes:
    """Compress ``data`` into a zlib stream at the default level."""
    try:
        return zlib.compress(bytes(data), zlib.Z_DEFAULT_COMPRESSION)
    except zlib.error as e:
        raise ZlibError(Z_STREAM_ERROR) from e


def zlib_decompress(data: bytes) -> bytes:
    """Decompress one zlib stream; bytes after its end are ignored."""
    decompressor = zlib.decompressobj()
    try:
        result = decompressor.decompress(bytes(data))
        result += decompressor.flush()
    except zlib.error as e:
        raise ZlibError(Z_DATA_ERROR) from e
    if not decompressor.eof:
        raise ZlibError(Z_BUF_ERROR)
    return result