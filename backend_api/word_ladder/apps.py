from __future__ import annotations

from django.apps import AppConfig, apps
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


# PUBLIC_INTERFACE
class WordLadderConfig(AppConfig):
    """App config that owns the word ladder engine for the process lifetime.

    The engine is built once in ready(), before any request is served. An
    empty puzzle catalog aborts start-up with ImproperlyConfigured.
    """

    name = "word_ladder"
    verbose_name = "Word Ladder"
    engine = None

    def ready(self) -> None:
        # Import here so loading the app registry stays free of file I/O.
        from .puzzles import EmptyCatalogError, build_engine

        options = getattr(settings, "WORD_LADDER", {})
        try:
            self.engine = build_engine(options.get("WORDS_PATH"))
        except EmptyCatalogError as exc:
            raise ImproperlyConfigured(str(exc)) from exc


# PUBLIC_INTERFACE
def get_engine():
    """Return the engine built at start-up by WordLadderConfig.ready()."""
    engine = apps.get_app_config("word_ladder").engine
    if engine is None:
        raise ImproperlyConfigured("Word ladder engine is not loaded; is the app installed?")
    return engine
