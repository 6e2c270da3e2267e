"""Singleton pattern: one shared service instance."""

import threading


class Service:
    """The shared service."""


_instance: Service | None = None
_lock = threading.Lock()


def new_service() -> Service:
    """Return the single Service, creating it on first use."""
    global _instance
    if _instance is None:
        with _lock:
            if _instance is None:
                _instance = Service()
    return _instance