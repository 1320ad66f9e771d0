import logging
from typing import Any, List, Optional, Sequence

from .store import Author, Book, LibraryStore, normalize_id

logger = logging.getLogger(__name__)


class QueryResolver:
    """Answers the library queries against a ``LibraryStore``.

    Every method is a pure lookup. Misses are returned as ``None`` for single
    records and as an empty list for filtered collections, never raised.
    """

    def __init__(self, store: LibraryStore) -> None:
        self.store = store

    def book(self, id: Any) -> Optional[Book]:
        book = self.store.get_book(normalize_id(id))
        if book is None:
            logger.debug("No book with id %r", id)
        return book

    def books(self, author_id: Any = None) -> Sequence[Book]:
        # an empty authorId means "no filter"
        if author_id is None or author_id == "":
            return self.store.books

        key = normalize_id(author_id)
        if key is None:
            logger.debug("Ignoring books filter with invalid author id %r", author_id)
            return []
        return [book for book in self.store.books if book.author == key]

    def author(self, id: Any) -> Optional[Author]:
        author = self.store.get_author(normalize_id(id))
        if author is None:
            logger.debug("No author with id %r", id)
        return author

    def authors(self) -> Sequence[Author]:
        return self.store.authors

    def book_author(self, book: Book) -> Optional[Author]:
        author = self.store.get_author(book.author)
        if author is None:
            logger.debug("Book %s references missing author %s", book.id, book.author)
        return author

    def author_books(self, author: Author) -> List[Book]:
        books = []
        for book_id in author.books:
            book = self.store.get_book(book_id)
            if book is None:
                logger.debug("Author %s references missing book %s", author.id, book_id)
                continue
            books.append(book)
        return books
