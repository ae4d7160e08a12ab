from .logging import configure_logging, configure_logging_from_settings

__all__ = ["configure_logging", "configure_logging_from_settings"]
