"""Suppression of noisy diagnostic output.

FilteredStream is stateless: each ``write`` is matched on its own, so a
message split across several writes may slip through. ``run_command``
always writes whole lines to it.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from typing import IO, Any

from kubediff.observability.logging import get_logger

_logger = get_logger("diff.filtering")


class FilteredStream:
    """Write sink that discards chunks matching any of *patterns*.

    Args:
        patterns: Regular expressions, as strings or compiled patterns.
            A chunk is dropped if any of them is found in it.
        target:   Destination for chunks that pass. Defaults to whatever
                  ``sys.stderr`` is at write time.
    """

    def __init__(
        self,
        patterns: Iterable[str | re.Pattern[str]],
        target: IO[Any] | None = None,
    ) -> None:
        self._patterns = [re.compile(p) if isinstance(p, str) else p for p in patterns]
        self._target = target

    @property
    def patterns(self) -> list[re.Pattern[str]]:
        return list(self._patterns)

    @property
    def target(self) -> IO[Any]:
        return self._target if self._target is not None else sys.stderr

    def matches(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in self._patterns)

    def write(self, data: str | bytes) -> int:
        """Forward *data* to the target unless it matches a pattern.

        Suppressed chunks report their full length as written.
        """
        text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
        if self.matches(text):
            _logger.debug("stderr_chunk_suppressed", size=len(data))
            return len(data)

        target = self.target
        if isinstance(data, bytes):
            buffer = getattr(target, "buffer", None)
            if buffer is not None:
                return buffer.write(data)
            return target.write(text)
        return target.write(data)

    def writelines(self, lines: Iterable[str | bytes]) -> None:
        for line in lines:
            self.write(line)

    def flush(self) -> None:
        self.target.flush()

    def writable(self) -> bool:
        return True
