from django.urls import path
from django.views.decorators.csrf import csrf_exempt

from ..schema import schema
from ..store import default_store
from .views import LibraryGraphQLView

store = default_store()

graphql_view = csrf_exempt(
    LibraryGraphQLView.as_view(schema=schema, store=store, graphiql=True)
)

urlpatterns = [
    path("", graphql_view),
    path("graphql", graphql_view),
]
