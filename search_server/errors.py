"""Exceptions raised by the search server on invalid caller input."""


class InvalidArgumentError(ValueError):
    """Bad document id, word, or query token."""


class DocumentNotFoundError(LookupError):
    """Lookup of a document id that is not in the server."""

    def __init__(self, document_id: int) -> None:
        super().__init__(f"Document id {document_id} not found")
        self.document_id = document_id
