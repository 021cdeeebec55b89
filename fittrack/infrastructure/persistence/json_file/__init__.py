from .key_value_storage import JsonFileKeyValueStorage

__all__ = ["JsonFileKeyValueStorage"]
