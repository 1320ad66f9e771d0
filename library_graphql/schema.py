from typing import Any, Dict, Optional

import graphene

from .resolvers import QueryResolver
from .store import LibraryStore, default_store


def get_resolver(info) -> QueryResolver:
    context = info.context
    resolver = context.get("resolver") if isinstance(context, dict) else None
    if resolver is None:
        raise RuntimeError("QueryResolver not configured in the execution context")
    return resolver


def build_context(store: Optional[LibraryStore] = None) -> Dict[str, Any]:
    return {
        "resolver": QueryResolver(store if store is not None else default_store()),
    }


class Author(graphene.ObjectType):
    id = graphene.ID(required=True)
    name = graphene.String(required=True)
    books = graphene.List(graphene.NonNull(lambda: Book))

    def resolve_books(self, info):
        # `self` is the Author record from the store, whose `books` holds ids
        return get_resolver(info).author_books(self)


class Book(graphene.ObjectType):
    id = graphene.ID(required=True)
    title = graphene.String()
    author = graphene.Field(Author)

    def resolve_author(self, info):
        return get_resolver(info).book_author(self)


class Query(graphene.ObjectType):
    book = graphene.Field(Book, id=graphene.ID(required=True))
    books = graphene.Field(
        graphene.NonNull(graphene.List(graphene.NonNull(Book))),
        author_id=graphene.ID(),
    )
    author = graphene.Field(Author, id=graphene.ID(required=True))
    authors = graphene.Field(graphene.NonNull(graphene.List(graphene.NonNull(Author))))

    def resolve_book(self, info, id):
        return get_resolver(info).book(id)

    def resolve_books(self, info, author_id=None):
        return get_resolver(info).books(author_id)

    def resolve_author(self, info, id):
        return get_resolver(info).author(id)

    def resolve_authors(self, info):
        return get_resolver(info).authors()


schema = graphene.Schema(query=Query)
