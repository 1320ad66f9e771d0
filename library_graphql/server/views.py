from graphene_django.views import GraphQLView

from ..resolvers import QueryResolver
from ..store import default_store


class LibraryGraphQLView(GraphQLView):
    store = None

    def __init__(self, store=None, **kwargs):
        super().__init__(**kwargs)
        if store is not None:
            self.store = store
        if self.store is None:
            self.store = default_store()

    def get_context(self, request):
        return {
            "request": request,
            "resolver": QueryResolver(self.store),
        }
