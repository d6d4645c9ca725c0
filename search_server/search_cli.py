"""
Interactive command-line search over a directory of documents.

Usage (from repo root):
    python -m search_server.search_cli --docs data/ --stop-words "and in at"
    search-server --docs data/ --nltk-stop-words english --remove-duplicates
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, TextIO

from .document import DocumentStatus
from .errors import InvalidArgumentError
from .index_builder import build_server_from_directory
from .log_duration import LogDuration
from .paginator import paginate
from .query import ExecutionPolicy
from .remove_duplicates import remove_duplicates
from .request_queue import RequestQueue
from .search_server import SearchServer
from .stop_words import load_nltk_stop_words
from .tokenizer import split_into_words

logger = logging.getLogger(__name__)


def run_search_loop(
    server: SearchServer,
    doc_id_to_path: dict[int, Path],
    *,
    status: DocumentStatus = DocumentStatus.ACTUAL,
    page_size: int = 2,
    policy: ExecutionPolicy = ExecutionPolicy.SEQ,
    input_stream: TextIO | None = None,
    output: TextIO | None = None,
) -> RequestQueue:
    """
    Read queries until an empty line or EOF and print paginated results.
    Returns the request queue so callers can inspect the history.
    """
    input_stream = input_stream or sys.stdin
    output = output or sys.stdout
    request_queue = RequestQueue(server)

    print(f"Loaded {server.get_document_count()} documents.", file=output)
    print("Enter queries ('-word' excludes). Empty line or Ctrl+C to exit.", file=output)

    while True:
        print("query> ", end="", file=output, flush=True)
        try:
            line = input_stream.readline()
        except KeyboardInterrupt:
            print(file=output)
            break
        raw_query = line.strip("\r\n")
        if not raw_query.strip():
            break

        try:
            with LogDuration(f"Query {raw_query!r}", log=logger, level=logging.DEBUG):
                documents = request_queue.add_find_request(raw_query, status, policy=policy)
        except InvalidArgumentError as e:
            print(f"Invalid query: {e}", file=output)
            continue

        if not documents:
            print("No documents matched the query.", file=output)
            continue

        for page_number, page in enumerate(paginate(documents, page_size), start=1):
            print(f"Page {page_number}:", file=output)
            for document in page:
                path = doc_id_to_path.get(document.id, f"<doc {document.id}>")
                print(f"  {document}  {path}", file=output)

    print(f"Requests without results: {request_queue.get_empty_count()}", file=output)
    return request_queue


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="In-memory TF-IDF document search.")
    parser.add_argument(
        "--docs",
        type=Path,
        required=True,
        help="Directory of .txt, .html or .json documents.",
    )
    parser.add_argument(
        "--stop-words",
        default="",
        help="Space-separated stop words.",
    )
    parser.add_argument(
        "--nltk-stop-words",
        metavar="LANGUAGE",
        default=None,
        help="Also use nltk's stop-word list for LANGUAGE (e.g. english).",
    )
    parser.add_argument(
        "--status",
        choices=[s.name for s in DocumentStatus],
        default=DocumentStatus.ACTUAL.name,
        help="Only return documents with this status.",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=2,
        help="Results per printed page.",
    )
    parser.add_argument(
        "--remove-duplicates",
        action="store_true",
        help="Remove documents with identical word sets before searching.",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Parse queries and remove documents on a thread pool.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug messages (per-query timings).",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if args.page_size < 1:
        parser.error("--page-size must be at least 1")

    stop_words = split_into_words(args.stop_words)
    if args.nltk_stop_words:
        stop_words += load_nltk_stop_words(args.nltk_stop_words)

    try:
        with LogDuration("Indexing", log=logger):
            server, doc_id_to_path = build_server_from_directory(args.docs, stop_words)
    except (FileNotFoundError, InvalidArgumentError) as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    policy = ExecutionPolicy.PAR if args.parallel else ExecutionPolicy.SEQ
    if args.remove_duplicates:
        remove_duplicates(server, policy)

    run_search_loop(
        server,
        doc_id_to_path,
        status=DocumentStatus[args.status],
        page_size=args.page_size,
        policy=policy,
    )


if __name__ == "__main__":
    main()
