"""
Sliding window over the most recent find requests, counting how many of them
returned no documents. One request is taken as one minute; the window covers
a day.
"""

from collections import deque
from typing import Union

from .document import Document, DocumentStatus
from .query import ExecutionPolicy
from .search_server import DocumentPredicate, SearchServer

MIN_IN_DAY = 1440


class RequestQueue:
    def __init__(self, search_server: SearchServer, capacity: int = MIN_IN_DAY) -> None:
        self.search_server = search_server
        self.capacity = capacity
        self._requests: deque[bool] = deque()
        self._empty_count = 0

    def add_find_request(
        self,
        raw_query: str,
        document_predicate: Union[DocumentPredicate, DocumentStatus, None] = None,
        *,
        policy: ExecutionPolicy = ExecutionPolicy.SEQ,
    ) -> list[Document]:
        documents = self.search_server.find_top_documents(raw_query, document_predicate, policy=policy)
        is_empty = not documents
        self._requests.append(is_empty)
        self._empty_count += is_empty
        if len(self._requests) > self.capacity:
            if self._requests.popleft():
                self._empty_count -= 1
        return documents

    def get_empty_count(self) -> int:
        return self._empty_count

    def __len__(self) -> int:
        return len(self._requests)
