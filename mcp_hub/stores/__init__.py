from .memory_store import InMemoryStore
from .seed_data import default_seed
