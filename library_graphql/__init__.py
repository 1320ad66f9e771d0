from .resolvers import QueryResolver
from .store import Author, Book, LibraryStore, default_store, normalize_id


__all__ = [
    "Author",
    "Book",
    "LibraryStore",
    "QueryResolver",
    "default_store",
    "normalize_id",
]
