from __future__ import annotations

import threading
from collections.abc import Callable, Hashable, KeysView
from typing import Generic, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class ClientRegistry(Generic[K, V]):
    """
    A registry of lazily constructed clients, one per key.

    `get_or_create` is safe to call from several threads: the factory runs at most
    once per key and every caller receives the same instance. Entries are never
    evicted or replaced.
    """

    def __init__(self, factory: Callable[[K], V]):
        self.__factory = factory
        self.__clients: dict[K, V] = {}
        self.__lock = threading.Lock()

    def get_or_create(self, key: K) -> V:
        """Return the client registered for `key`, building it on first use."""

        client = self.__clients.get(key)
        if client is not None:
            return client

        with self.__lock:
            client = self.__clients.get(key)
            if client is None:
                client = self.__factory(key)
                self.__clients[key] = client
            return client

    def keys(self) -> KeysView[K]:
        return self.__clients.keys()

    def __contains__(self, key: object) -> bool:
        return key in self.__clients

    def __len__(self) -> int:
        return len(self.__clients)
