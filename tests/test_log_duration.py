import io
import logging
import re

from search_server.document import DocumentStatus
from search_server.log_duration import LogDuration
from search_server.search_server import SearchServer


def test_writes_to_stream() -> None:
    server = SearchServer("and in at")
    server.add_document(6, "curly cat curly tail", DocumentStatus.ACTUAL, [7, 2, 7])
    stream = io.StringIO()
    with LogDuration("Long task", stream) as guard:
        server.find_top_documents("cat -dog")
    assert guard.elapsed_us is not None and guard.elapsed_us >= 0
    assert re.fullmatch(r"Long task: Operation time: \d+ mcs\n", stream.getvalue())


def test_logs_without_stream(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="search_server.log_duration"):
        with LogDuration():
            pass
    assert re.fullmatch(r"Operation time: \d+ mcs", caplog.records[-1].getMessage())


def test_custom_logger_and_level(caplog) -> None:
    log = logging.getLogger("timing")
    with caplog.at_level(logging.DEBUG, logger="timing"):
        with LogDuration("Query", log=log, level=logging.DEBUG):
            pass
    record = caplog.records[-1]
    assert record.name == "timing"
    assert record.levelno == logging.DEBUG
    assert record.getMessage().startswith("Query: Operation time: ")
