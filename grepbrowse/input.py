"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing for arrows and paging keys; sequences that are
not recognized decode to ``UNKNOWN`` so they never read as a bare Escape.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
CSI_MAX_PARAM_BYTES = 32
UNKNOWN_KEY = "UNKNOWN"
_PENDING_BYTES: list[bytes] = []

_CSI_FINAL_KEYS = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
    b"H": "HOME",
    b"F": "END",
}
_CSI_TILDE_KEYS = {
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
}


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_csi_sequence(fd: int) -> tuple[bytes, bytes | None]:
    """Consume a CSI sequence after ``ESC [`` through its final byte.

    Returns the parameter bytes and the final byte (``0x40..0x7E``), or
    ``None`` as final when the sequence is cut short or overlong.
    """
    params: list[bytes] = []
    while len(params) <= CSI_MAX_PARAM_BYTES:
        part = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if part is None:
            return b"".join(params), None
        if 0x40 <= part[0] <= 0x7E:
            return b"".join(params), part
        params.append(part)
    return b"".join(params), None


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Block for one key and return its token.

    Returns ``""`` on timeout or end of input.
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

    if ch in {b"\r", b"\n"}:
        return "ENTER"
    if ch == b"\t":
        return "TAB"
    if ch in {b"\x08", b"\x7f"}:
        return "BACKSPACE"

    if ch != b"\x1b":
        return ch.decode("utf-8", errors="replace")

    # Only a lone ESC is "ESC"; every other escape sequence is consumed whole.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"\x1b":
        _PENDING_BYTES.append(seq)
        return "ESC"
    if seq == b"O":
        # SS3 arrows sent in application cursor mode.
        seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if seq is None:
            return UNKNOWN_KEY
        return _CSI_FINAL_KEYS.get(seq, UNKNOWN_KEY)
    if seq != b"[":
        return UNKNOWN_KEY
    params, final = _read_csi_sequence(fd)
    if final is None:
        return UNKNOWN_KEY
    if final == b"~":
        return _CSI_TILDE_KEYS.get(params, UNKNOWN_KEY)
    if not params:
        return _CSI_FINAL_KEYS.get(final, UNKNOWN_KEY)
    return UNKNOWN_KEY
