"""Line-oriented handler writing resolved parts to a pair of text streams."""

from __future__ import annotations

import os
import sys
import traceback
from typing import IO, Iterable, Optional

from ..formatting.colorizer import strip_ansi

_PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.realpath(__file__))) + os.sep


class StreamHandler:
    """
    Writes ``" ".join(parts)`` as one line per call.

    ``log``, ``info`` and ``debug`` go to the standard stream; ``warn``,
    ``error`` and ``trace`` to the error stream. Streams left as ``None``
    resolve to ``sys.stdout``/``sys.stderr`` at write time.

    ``keep_color``: True writes escapes as given, False strips them, None
    strips them only when the target stream is not a TTY.
    """

    def __init__(
        self,
        stdout: Optional[IO[str]] = None,
        stderr: Optional[IO[str]] = None,
        *,
        keep_color: Optional[bool] = True,
        owned: Iterable[IO[str]] = (),
    ) -> None:
        self._stdout = stdout
        self._stderr = stderr
        self.keep_color = keep_color
        self._owned = list(owned)

    @property
    def stdout(self) -> IO[str]:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def stderr(self) -> IO[str]:
        return self._stderr if self._stderr is not None else sys.stderr

    def log(self, *parts: str) -> None:
        self._write(self.stdout, parts)

    def info(self, *parts: str) -> None:
        self._write(self.stdout, parts)

    def debug(self, *parts: str) -> None:
        self._write(self.stdout, parts)

    def warn(self, *parts: str) -> None:
        self._write(self.stderr, parts)

    def error(self, *parts: str) -> None:
        self._write(self.stderr, parts)

    def trace(self, *parts: str) -> None:
        frames = [
            frame for frame in traceback.extract_stack()
            if not os.path.realpath(frame.filename).startswith(_PACKAGE_ROOT)
        ]
        stack = "".join(traceback.format_list(frames)).rstrip("\n")
        self._write(self.stderr, ("Trace:", *parts), suffix=stack)

    def close(self) -> None:
        owned, self._owned = self._owned, []
        for stream in owned:
            stream.close()

    def _write(self, stream: IO[str], parts: Iterable[str], suffix: str = "") -> None:
        line = " ".join(parts)
        if suffix:
            line = f"{line}\n{suffix}"
        if not self._should_keep_color(stream):
            line = strip_ansi(line)
        stream.write(line + "\n")
        stream.flush()

    def _should_keep_color(self, stream: IO[str]) -> bool:
        if self.keep_color is None:
            isatty = getattr(stream, "isatty", None)
            return bool(isatty and isatty())
        return self.keep_color
