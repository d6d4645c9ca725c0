"""In-memory TF-IDF search server package."""

from .document import Document, DocumentStatus, compute_average_rating
from .errors import DocumentNotFoundError, InvalidArgumentError
from .query import ExecutionPolicy, Query, QueryParser
from .stop_words import StopWordSet, load_nltk_stop_words
from .search_server import SearchServer, MAX_RESULT_DOCUMENT_COUNT, RELEVANCE_EPSILON
from .remove_duplicates import remove_duplicates
from .request_queue import RequestQueue
from .paginator import Page, Paginator, paginate
from .log_duration import LogDuration
from .index_builder import build_server_from_directory
