from django.urls import include, path
from drf_yasg import openapi
from drf_yasg.views import get_schema_view
from rest_framework import permissions

schema_view = get_schema_view(
    openapi.Info(
        title="Word Ladder API",
        default_version="v1",
        description="Puzzle selection, step and solution validation, and hints for word ladders.",
    ),
    public=True,
    permission_classes=[permissions.AllowAny],
)

urlpatterns = [
    path("api/word-ladder/", include("word_ladder.urls")),
    path("api/docs/", schema_view.with_ui("swagger", cache_timeout=0), name="schema-swagger-ui"),
    path("api/swagger.json", schema_view.without_ui(cache_timeout=0), name="schema-json"),
]
