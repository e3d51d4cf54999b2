# SPDX-FileCopyrightText: 2025 Dhravya Shah
# SPDX-License-Identifier: MIT

"""
Incremental Server-Sent-Events frame reading.

Only the first frame of a stream is ever needed to classify a transport, so the reader
stops as soon as one blank-line-terminated frame has arrived and leaves the rest of the
stream untouched.
"""

from __future__ import annotations

import codecs
import logging
import re
import threading
from collections.abc import Callable, Iterable

from ..models.transport import SseFrame

logger = logging.getLogger(__name__)

_FRAME_BOUNDARY_RE = re.compile(r"\r?\n\r?\n")
_LINE_SPLIT_RE = re.compile(r"\r?\n")


def parse_sse_frame(text: str) -> SseFrame:
    """Parse the lines of a single frame (without its terminating blank line)."""
    frame = SseFrame()
    data_lines: list[str] = []
    for line in _LINE_SPLIT_RE.split(text):
        if line.startswith(":"):
            continue
        name, sep, value = line.partition(":")
        field = name.strip()
        if sep and value.startswith(" "):
            value = value[1:]
        if field == "event":
            frame.event = value
        elif field == "data":
            data_lines.append(value)
        elif field == "id":
            frame.id = value
        # retry and unknown fields are ignored
    if data_lines:
        frame.data = "\n".join(data_lines)
    return frame


class SseFrameDecoder:
    """
    Accumulates stream chunks and cuts them into frames.

    Bytes are decoded with an incremental UTF-8 decoder, so a multi-byte character split
    across chunks is reassembled before it reaches the buffer.
    """

    def __init__(self) -> None:
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._buffer = ""

    @property
    def pending(self) -> str:
        return self._buffer

    def feed(self, chunk: bytes) -> SseFrame | None:
        """Add a chunk and return the next complete frame, if one is now available."""
        self._buffer += self._decoder.decode(chunk)
        return self.next_frame()

    def next_frame(self) -> SseFrame | None:
        """Pop one complete frame from the buffer without consuming more input."""
        match = _FRAME_BOUNDARY_RE.search(self._buffer)
        if match is None:
            return None
        raw = self._buffer[: match.start()]
        self._buffer = self._buffer[match.end() :]
        return parse_sse_frame(raw)


def read_first_sse_frame(
    chunks: Iterable[bytes],
    timeout: float | None,
    *,
    cancel: Callable[[], None] | None = None,
) -> SseFrame | None:
    """
    Return the first complete frame of an event stream, or None.

    None covers stream end, expiry of `timeout` seconds and any error raised while
    reading. On expiry `cancel` is invoked to unblock the underlying stream; errors from
    it are ignored. The caller still owns the stream and releases it afterwards.
    """
    decoder = SseFrameDecoder()
    expired = threading.Event()

    def _expire() -> None:
        expired.set()
        if cancel is None:
            return
        try:
            cancel()
        except Exception as exc:  # noqa: BLE001
            logger.debug("cancelling event stream failed: %s", exc)

    timer: threading.Timer | None = None
    if timeout is not None and timeout > 0:
        timer = threading.Timer(timeout, _expire)
        timer.daemon = True
        timer.start()

    try:
        for chunk in chunks:
            if expired.is_set():
                break
            frame = decoder.feed(chunk)
            if frame is not None:
                return frame
    except Exception as exc:  # noqa: BLE001
        if not expired.is_set():
            logger.debug("reading event stream failed: %s", exc)
    finally:
        if timer is not None:
            timer.cancel()

    if expired.is_set():
        logger.debug("no event frame within %.3fs", timeout)
    return None


__all__ = ["SseFrameDecoder", "parse_sse_frame", "read_first_sse_frame"]
