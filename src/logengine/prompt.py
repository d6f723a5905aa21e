"""Interactive text prompt for deferred message parts."""

from __future__ import annotations

import asyncio
import sys
from typing import IO, Optional

CLEAR_LINE = "\r\x1b[2K"


class Prompt:
    """
    Ask a question on a text stream and read one line of answer.

    The blocking read runs in a worker thread so the event loop stays free.
    """

    def __init__(self, stdin: Optional[IO[str]] = None, stdout: Optional[IO[str]] = None) -> None:
        self._stdin = stdin
        self._stdout = stdout

    async def ask(self, question: str) -> str:
        stdin = self._stdin if self._stdin is not None else sys.stdin
        stdout = self._stdout if self._stdout is not None else sys.stdout
        stdout.write(CLEAR_LINE + question)
        stdout.flush()
        answer = await asyncio.to_thread(stdin.readline)
        return answer.rstrip("\r\n")
