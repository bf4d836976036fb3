# mcp_hub/stores/memory_store.py

import copy
from typing import Any, Callable, Dict, List, Optional

SeedFactory = Callable[[], Dict[str, Dict[str, Any]]]


class InMemoryStore:
    """
    Backend simulado para los handlers que no llaman a una API real.
    Se crea explícitamente (una instancia por app o por test) y se pasa al
    handler en cada llamada.
    """

    def __init__(self, seed_factory: Optional[SeedFactory] = None):
        self._seed_factory = seed_factory
        self._collections: Dict[str, Dict[str, Any]] = {}
        self.reset()

    def reset(self) -> None:
        """Vuelve a los datos semilla."""
        seed = self._seed_factory() if self._seed_factory else {}
        self._collections = {name: dict(items) for name, items in copy.deepcopy(seed).items()}

    def get(self, collection: str, key: str) -> Optional[Any]:
        return self._collections.get(collection, {}).get(key)

    def put(self, collection: str, key: str, value: Any) -> None:
        self._collections.setdefault(collection, {})[key] = value

    def list(self, collection: str) -> List[Any]:
        return list(self._collections.get(collection, {}).values())

    def __contains__(self, collection: str) -> bool:
        return collection in self._collections
