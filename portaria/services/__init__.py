from .collections import ALL_SCOPE, COLLECTIONS, Collection, CollectionSpec, UnknownCollection, resolve_scopes
from .store import CollectionStore
from .session import LocalStorage, SessionShell
from .front_desk import FrontDesk, build_front_desk, build_gateway

__all__ = [
    "ALL_SCOPE",
    "COLLECTIONS",
    "Collection",
    "CollectionSpec",
    "UnknownCollection",
    "resolve_scopes",
    "CollectionStore",
    "LocalStorage",
    "SessionShell",
    "FrontDesk",
    "build_front_desk",
    "build_gateway"
]
