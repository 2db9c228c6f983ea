"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens
(``UP``, ``SHIFT_DOWN``, ``ENTER``, ``ESC``, ...). Printable bytes come back
as the decoded character itself.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_KEYS = {
    b"\x03": "CTRL_C",
    b"\r": "ENTER",
    b"\n": "ENTER",
    b"\t": "TAB",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
}

_ARROWS = {b"A": "UP", b"B": "DOWN", b"C": "RIGHT", b"D": "LEFT"}
# rxvt reports shifted arrows as lowercase finals.
_RXVT_SHIFT_ARROWS = {b"a": "SHIFT_UP", b"b": "SHIFT_DOWN", b"c": "SHIFT_RIGHT", b"d": "SHIFT_LEFT"}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, lead: bytes) -> bytes:
    """Collect continuation bytes for a multi-byte UTF-8 character."""
    first = lead[0]
    if first >= 0xF0:
        needed = 3
    elif first >= 0xE0:
        needed = 2
    elif first >= 0xC0:
        needed = 1
    else:
        needed = 0
    data = lead
    for _ in range(needed):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data


UNKNOWN_KEY = "UNKNOWN"
MAX_CSI_LENGTH = 16

_TILDE_KEYS = {b"2": "INSERT", b"3": "DELETE", b"5": "PAGE_UP", b"6": "PAGE_DOWN", b"1": "HOME", b"4": "END"}
_EDGE_KEYS = {b"H": "HOME", b"F": "END"}
_MODIFIER_PREFIXES = {b"2": "SHIFT_", b"3": "ALT_", b"9": "ALT_", b"5": "CTRL_"}


def _read_csi(fd: int) -> tuple[bytes, bytes] | None:
    """Read CSI parameter/intermediate bytes up to the final byte.

    Returns ``(params, final)``, or ``None`` when the sequence stalls.
    """
    params = b""
    while len(params) < MAX_CSI_LENGTH:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return None
        if 0x40 <= part[0] <= 0x7E:
            return params, part
        params += part
    return params, b""


def _decode_csi(params: bytes, final: bytes) -> str:
    if final == b"~":
        return _TILDE_KEYS.get(params.split(b";")[0], UNKNOWN_KEY)
    if not params and final in _RXVT_SHIFT_ARROWS:
        return _RXVT_SHIFT_ARROWS[final]
    name = _ARROWS.get(final) or _EDGE_KEYS.get(final)
    if name is None:
        return UNKNOWN_KEY
    if not params:
        return name
    fields = params.split(b";")
    if len(fields) != 2 or fields[0] != b"1":
        return UNKNOWN_KEY
    return _MODIFIER_PREFIXES.get(fields[1], "") + name


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Block for the next key on ``fd`` and return its token.

    With ``timeout_ms`` set, an empty string is returned when nothing arrives
    in time. End of input also yields an empty string. Complete escape
    sequences that name no known key decode to ``UNKNOWN``; ``ESC`` is only
    returned for the Escape key itself.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            return ""

    if ch in _CONTROL_KEYS:
        return _CONTROL_KEYS[ch]

    if ch != b"\x1b":
        return _read_utf8_tail(fd, ch).decode("utf-8", errors="replace")

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"O":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return "ESC"
        return _ARROWS.get(final) or _EDGE_KEYS.get(final) or UNKNOWN_KEY
    if seq != b"[":
        _PENDING_BYTES.append(seq)
        return "ESC"
    csi = _read_csi(fd)
    if csi is None:
        return "ESC"
    return _decode_csi(*csi)
