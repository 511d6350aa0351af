# -*- coding: utf-8 -*-
import io
from typing import BinaryIO, Iterable, Iterator, Optional, Tuple

from arinc_enhance.core.errors import DecodeFailure, IOFailure
from arinc_enhance.types.base_type import Cols, PostProcess, Row

ARINC_WIDTH = 132
ENCODING = "latin1"

SECTION_AIRPORT = "P"

# Sections whose subsection code lives in column 13; everything else uses column 6.
SUBSECTION_COLUMN_BY_SECTION = {
    "P": 13,
    "H": 13,
}

TCODE_ALIASES = {
    "D ": "DV",
}

CONT_NO_COLUMN_BY_TCODE = {
    "PC": 22,
    "PF": 39,
    "PI": 22,
    "EA": 22,
    "DB": 22,
    "DV": 22,
}


# ---------- low-level helpers ----------
def pad132(s: str) -> str:
    s = s.rstrip("\r\n")
    if len(s) < ARINC_WIDTH:
        s = s + " " * (ARINC_WIDTH - len(s))
    return s

def slice_(line: str, a: int, b: int) -> str:
    return line[a-1:b]

def type_tuple(line: str) -> Tuple[str, str]:
    section = slice_(line, 5, 5)
    column = SUBSECTION_COLUMN_BY_SECTION.get(section, 6)
    return (section, slice_(line, column, column))

def tcode(line: str) -> str:
    s, u = type_tuple(line)
    raw = f"{s}{u}"
    return TCODE_ALIASES.get(raw, raw)

def cont_no(line: str, column: int = 22) -> str:
    # Primary: blank, '0' or '1'
    c = slice_(line, column, column)
    return "" if c in ("", "0", "1", " ") else c

def is_primary(line: str) -> bool:
    column = CONT_NO_COLUMN_BY_TCODE.get(tcode(line))
    if column is None:
        return True
    return cont_no(line, column) == ""

# ---------- shapes ----------
def span(cols: Cols) -> int:
    return max(rng[1] for _, rng in cols)

def decode_record(line: str, cols: Cols, postprocess_row: PostProcess = None,
                  shape: str = "record") -> Row:
    """Map a fixed-width line to a row of raw column values.

    Payload columns are not validated; only the width is. Identifier fields
    are cleaned up by the shape's postprocess_row hook.
    """
    need = span(cols)
    if len(line) < need:
        raise DecodeFailure(f"{shape} record is {len(line)} columns wide, need {need}")
    row: Row = {name: slice_(line, rng[0], rng[1]) for name, rng in cols}
    if postprocess_row:
        postprocess_row(row)
    return row

def encode_record(row: Row, cols: Cols, base: Optional[str] = None) -> str:
    """Render a row into a fixed-width line.

    Columns that no field in cols covers are taken from base (the source
    line), or left blank when there is none.
    """
    chars = list(pad132(base or ""))
    for name, (a, b) in cols:
        width = b - a + 1
        value = str(row.get(name, "") or "")
        chars[a-1:b] = value.ljust(width)[:width]
    return "".join(chars)

# ---------- IO ----------
def read_lines(stream: BinaryIO) -> Iterator[Tuple[int, str]]:
    """Yield (line_number, text) pairs; line terminators are stripped."""
    lineno = 0
    try:
        for raw in stream:
            lineno += 1
            yield lineno, raw.decode(ENCODING).rstrip("\r\n")
    except OSError as exc:
        raise IOFailure(f"problem reading data: {exc}", line_number=lineno + 1) from exc

def write_lines(stream: BinaryIO, lines: Iterable[str]) -> int:
    n = 0
    try:
        for ln in lines:
            stream.write(f"{ln}\n".encode(ENCODING))
            n += 1
    except OSError as exc:
        raise IOFailure(f"could not write processed data: {exc}") from exc
    return n

def rewindable(stream: BinaryIO) -> BinaryIO:
    """Return stream itself when seekable, else an in-memory copy of it."""
    if stream.seekable():
        return stream
    try:
        return io.BytesIO(stream.read())
    except OSError as exc:
        raise IOFailure(f"problem reading data: {exc}") from exc

def rewind(stream: BinaryIO) -> None:
    try:
        stream.seek(0, io.SEEK_SET)
    except OSError as exc:
        raise IOFailure(f"could not seek to start of file: {exc}") from exc
