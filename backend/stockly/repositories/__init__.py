from stockly.repositories.kv_repo import KeyValueRepository

__all__ = ["KeyValueRepository"]
