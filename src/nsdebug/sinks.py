"""Write destinations for rendered records."""

from __future__ import annotations

import io
from typing import Any


class DiscardSink(io.RawIOBase):
    """Binary sink that accepts and drops everything written to it."""

    def writable(self) -> bool:
        return True

    def write(self, b: bytes | bytearray | memoryview) -> int:
        return len(b)


def write_text(sink: Any, text: str) -> None:
    """Write text to a sink in whichever form it accepts.

    ``io.TextIOBase`` streams get ``str`` directly. Anything else is offered
    UTF-8 bytes first and ``str`` if it rejects them, which covers text-mode
    writers outside the io hierarchy (spooled temp files, duck-typed objects).
    """
    if isinstance(sink, io.TextIOBase):
        sink.write(text)
        return
    try:
        sink.write(text.encode("utf-8"))
    except TypeError:
        sink.write(text)
