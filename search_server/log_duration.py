"""
Time a block of code and log how long it took:

    with LogDuration("Long task"):
        server.find_top_documents("cat -dog")
"""

import logging
import time
from typing import Optional, TextIO

logger = logging.getLogger(__name__)


class LogDuration:
    """
    Context manager reporting elapsed time in microseconds on exit.
    Writes to stream if given, otherwise logs at level on log (this module's
    logger by default).
    """

    def __init__(
        self,
        operation_name: str = "",
        stream: Optional[TextIO] = None,
        *,
        log: Optional[logging.Logger] = None,
        level: int = logging.INFO,
    ) -> None:
        self.operation_name = operation_name
        self.stream = stream
        self.log = log or logger
        self.level = level
        self.elapsed_us: Optional[int] = None
        self._start = 0.0

    def __enter__(self) -> "LogDuration":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed_us = int((time.perf_counter() - self._start) * 1_000_000)
        message = f"Operation time: {self.elapsed_us} mcs"
        if self.operation_name:
            message = f"{self.operation_name}: {message}"
        if self.stream is not None:
            print(message, file=self.stream)
        else:
            self.log.log(self.level, message)
