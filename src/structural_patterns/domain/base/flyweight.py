"""Flyweight factory - canonical shared instances keyed by content."""
import threading
from typing import Callable, Dict, Generic, Hashable, List, Optional, TypeVar

from structural_patterns.infrastructure.logging.logger import get_logger

K = TypeVar('K', bound=Hashable)
V = TypeVar('V')


class FlyweightFactory(Generic[K, V]):
    """
    Cache that hands out exactly one shared value per key.

    Keys are compared structurally (equality and hash), so two field-wise
    equal keys built at different call sites resolve to the same entry.
    The first request for a key builds the value with ``creator``; every
    later request returns that same instance. Entries live as long as the
    factory; there is no eviction.
    """

    def __init__(self, creator: Callable[[K], V], name: Optional[str] = None):
        """
        Initialize the factory.

        Args:
            creator: Builds the shared value for a key on first request
            name: Label used in log records
        """
        self._creator = creator
        self._name = name or self.__class__.__name__
        self._flyweights: Dict[K, V] = {}
        self._lock = threading.Lock()
        self._creation_count = 0
        self.logger = get_logger(__name__)

    def get_or_create(self, key: K) -> V:
        """
        Return the shared value for ``key``, creating it on first request.

        Args:
            key: Hashable key holding every intrinsic attribute

        Returns:
            The canonical instance for the key
        """
        with self._lock:
            flyweight = self._flyweights.get(key)
            if flyweight is None:
                flyweight = self._creator(key)
                self._flyweights[key] = flyweight
                self._creation_count += 1
                self.logger.debug(
                    "Created flyweight",
                    factory=self._name,
                    key=str(key),
                    size=len(self._flyweights)
                )
            return flyweight

    def get(self, key: K) -> Optional[V]:
        """Look up a shared value without creating it."""
        with self._lock:
            return self._flyweights.get(key)

    def keys(self) -> List[K]:
        """Keys in creation order."""
        with self._lock:
            return list(self._flyweights)

    @property
    def creation_count(self) -> int:
        """Number of values the creator has built."""
        return self._creation_count

    def __len__(self) -> int:
        return len(self._flyweights)

    def __contains__(self, key: object) -> bool:
        return key in self._flyweights

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self._name}', size={len(self)})"
