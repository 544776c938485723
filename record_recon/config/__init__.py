from .settings import Settings, settings, split_fields

__all__ = ["Settings", "settings", "split_fields"]
