"""Apply a textual structure template to binary data and describe the fields."""

from __future__ import annotations

import enum
import struct
from pathlib import Path
from typing import Callable

TYPE_MAX_LEN = 16
"""Longest variable type a template is expected to use."""
NAME_MAX_LEN = 128
"""Longest variable name a template is expected to use."""

_WHITESPACE = frozenset(" \t\r\n")

FILENAME_LABEL = "File name:"
TEMPLATE_FILE_LABEL = "Template file:"
APPLIED_AT_LABEL = "Applied at offset:"

FMT_BYTE_WITH_CHAR = "= {signed} (signed) = {unsigned} (unsigned) = 0x{unsigned:02x} = '{char}'"
FMT_BYTE = "= {signed} (signed) = {unsigned} (unsigned) = 0x{unsigned:02x}"
FMT_WORD = "= {signed} (signed) = {unsigned} (unsigned) = 0x{unsigned:04x}"
FMT_DWORD = "= {signed} (signed) = {unsigned} (unsigned) = 0x{unsigned:08x}"
FMT_FLOAT = "= {value:f} = 0x{bits:08x}"
FMT_DOUBLE = "= {value:g}"
FMT_LENGTH = "-> Length of template = {length} bytes."

ERR_NO_SPACE_BYTE = "ERROR: not enough space for byte-size datum."
ERR_NO_SPACE_WORD = "ERROR: not enough space for WORD-size datum."
ERR_NO_SPACE_DWORD = "ERROR: not enough space for DWORD-size datum."
ERR_NO_SPACE_FLOAT = "ERROR: not enough space for float-size datum."
ERR_NO_SPACE_DOUBLE = "ERROR: not enough space for double-size datum."
ERR_NO_VARIABLE = "ERROR: missing variable name."
ERR_UNKNOWN_TYPE = "ERROR: Unknown variable type"


class Endian(enum.Enum):
    """Byte order used to read multi-byte values."""

    LITTLE = "<"
    BIG = ">"


def skip_whitespace(text: str, index: int) -> int:
    """Index of the next non-whitespace character, or ``len(text)`` if none."""
    while index < len(text) and text[index] in _WHITESPACE:
        index += 1
    return index


def read_token(text: str, index: int) -> tuple[str, int]:
    """Read non-whitespace characters from ``index``.

    Returns the token and the index just past it. That index equals
    ``len(text)`` when the token runs up to the end of the text.
    """
    end = index
    while end < len(text) and text[end] not in _WHITESPACE:
        end += 1
    return text[index:end], end


def _describe_byte(chunk: bytes, endian: Endian) -> str:
    value = chunk[0]
    signed = value - 256 if value >= 128 else value
    if value:
        return FMT_BYTE_WITH_CHAR.format(signed=signed, unsigned=value, char=chr(value))
    return FMT_BYTE.format(signed=signed, unsigned=value)


def _describe_word(chunk: bytes, endian: Endian) -> str:
    (unsigned,) = struct.unpack(endian.value + "H", chunk)
    (signed,) = struct.unpack(endian.value + "h", chunk)
    return FMT_WORD.format(signed=signed, unsigned=unsigned)


def _describe_dword(chunk: bytes, endian: Endian) -> str:
    (unsigned,) = struct.unpack(endian.value + "I", chunk)
    (signed,) = struct.unpack(endian.value + "i", chunk)
    return FMT_DWORD.format(signed=signed, unsigned=unsigned)


def _describe_float(chunk: bytes, endian: Endian) -> str:
    (value,) = struct.unpack(endian.value + "f", chunk)
    (bits,) = struct.unpack(endian.value + "I", chunk)
    return FMT_FLOAT.format(value=value, bits=bits)


def _describe_double(chunk: bytes, endian: Endian) -> str:
    (value,) = struct.unpack(endian.value + "d", chunk)
    return FMT_DOUBLE.format(value=value)


_Describer = Callable[[bytes, Endian], str]

_TYPES: dict[str, tuple[int, _Describer, str]] = {}
for _names, _spec in (
    (("BYTE", "char"), (1, _describe_byte, ERR_NO_SPACE_BYTE)),
    (("WORD", "short"), (2, _describe_word, ERR_NO_SPACE_WORD)),
    (("DWORD", "int", "long", "LONG"), (4, _describe_dword, ERR_NO_SPACE_DWORD)),
    (("float",), (4, _describe_float, ERR_NO_SPACE_FLOAT)),
    (("double",), (8, _describe_double, ERR_NO_SPACE_DOUBLE)),
):
    for _name in _names:
        _TYPES[_name] = _spec


class TemplateApplier:
    """Reads a template of ``type name`` pairs and describes the data they cover."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._original_filename = ""
        self._template_filename = ""
        self._template_text = ""
        self._parts: list[str] = []

    def set_original_filename(self, filename: str) -> None:
        """Name of the file whose data the template is applied to."""
        self._original_filename = str(filename)

    def open_template(self, filename: str | Path) -> None:
        """Read the template file; raises OSError or ValueError if empty."""
        raw = Path(filename).read_bytes()
        if not raw:
            raise ValueError(f"template file is empty: {filename}")
        self._template_filename = str(filename)
        self._template_text = raw.decode("latin-1")

    def load_template_text(self, text: str | bytes) -> None:
        """Use ``text`` as the template source."""
        if isinstance(text, (bytes, bytearray)):
            text = bytes(text).decode("latin-1")
        self._template_text = text

    def create_template_array(self, cur_byte: int) -> None:
        """Write the header naming both files and the starting offset."""
        self._parts.append(
            f"{FILENAME_LABEL} {self._original_filename}\r\n"
            f"{TEMPLATE_FILE_LABEL} {self._template_filename}\r\n"
            f"{APPLIED_AT_LABEL} {cur_byte}\r\n\r\n"
        )

    def apply_template(self, endian: Endian, cur_byte: int) -> None:
        """Describe the data from ``cur_byte`` on, one template field at a time.

        Problems in the template are reported in the result text, which then
        ends at the error.
        """
        if cur_byte < 0 or cur_byte > len(self._data):
            raise IndexError("start offset outside the data")
        text = self._template_text
        out = self._parts
        index = 0
        fpos = cur_byte
        while index < len(text):
            index = skip_whitespace(text, index)
            if index >= len(text):
                break
            cmd, index = read_token(text, index)
            if index >= len(text):
                out.append(ERR_NO_VARIABLE)
                return
            spec = _TYPES.get(cmd.partition("\0")[0])
            if spec is None:
                out.append(f'{ERR_UNKNOWN_TYPE} "{cmd}"')
                return
            size, describe, no_space = spec
            index = skip_whitespace(text, index)
            if index >= len(text):
                out.append(ERR_NO_VARIABLE)
                return
            if len(self._data) - fpos < size:
                out.append(no_space)
                return
            name, index = read_token(text, index)
            chunk = self._data[fpos:fpos + size]
            out.append(f"{cmd} {name} {describe(chunk, endian)}\r\n")
            fpos += size
        out.append(f"\r\n{FMT_LENGTH.format(length=fpos - cur_byte)}\r\n")

    def result(self) -> str:
        """The text produced so far."""
        return "".join(self._parts)