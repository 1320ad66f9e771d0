import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple, TypeVar


@dataclass(frozen=True)
class Book:
    id: int
    title: Optional[str]
    # id of the Author who wrote this book
    author: int


@dataclass(frozen=True)
class Author:
    id: int
    name: str
    books: Tuple[int, ...] = ()


Record = TypeVar("Record", Book, Author)


# Text ids with a longer integer part never match.
MAX_ID_DIGITS = 64

_ID_PATTERN = re.compile(r"([+-]?)([0-9]+)(?:\.0*)?")


def normalize_id(value: Any) -> Optional[int]:
    """Coerce an identifier from the GraphQL boundary to the canonical int.

    GraphQL ``ID`` values arrive as text, so ``"1"``, ``" 1 "`` and ``"1.0"``
    all normalize to ``1``. Values that can't represent an integer, or whose
    text runs past ``MAX_ID_DIGITS`` digits, return ``None`` and never match
    a record.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        match = _ID_PATTERN.fullmatch(value.strip())
        if match is None:
            return None
        sign, digits = match.groups()
        digits = digits.lstrip("0") or "0"
        if len(digits) > MAX_ID_DIGITS:
            return None
        return int(sign + digits)
    return None


def _index(records: Tuple[Record, ...], kind: str) -> Dict[int, Record]:
    index: Dict[int, Record] = {}
    for record in records:
        if record.id in index:
            raise ValueError(f"Duplicate {kind} id: {record.id}")
        index[record.id] = record
    return index


class LibraryStore:
    """Read-only snapshot of the book and author collections.

    Built once and shared between requests. Collections are exposed as
    tuples in their original order, and nothing mutates them afterwards.
    """

    def __init__(self, books: Iterable[Book], authors: Iterable[Author]) -> None:
        self._books = tuple(books)
        self._authors = tuple(authors)
        self._books_by_id = _index(self._books, "book")
        self._authors_by_id = _index(self._authors, "author")

    @property
    def books(self) -> Tuple[Book, ...]:
        return self._books

    @property
    def authors(self) -> Tuple[Author, ...]:
        return self._authors

    def get_book(self, book_id: Optional[int]) -> Optional[Book]:
        return self._books_by_id.get(book_id)

    def get_author(self, author_id: Optional[int]) -> Optional[Author]:
        return self._authors_by_id.get(author_id)


SEED_BOOKS = (
    Book(id=1, title="The Awakening", author=1),
    Book(id=2, title="City of Glass", author=2),
)

SEED_AUTHORS = (
    Author(id=1, name="Kate Chopin", books=(1,)),
    Author(id=2, name="Paul Auster", books=(2,)),
)


def default_store() -> LibraryStore:
    return LibraryStore(SEED_BOOKS, SEED_AUTHORS)
