from .logging import log, settings

__all__ = ["settings", "log"]
