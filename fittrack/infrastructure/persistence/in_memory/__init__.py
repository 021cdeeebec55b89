from .key_value_storage import InMemoryKeyValueStorage

__all__ = ["InMemoryKeyValueStorage"]
