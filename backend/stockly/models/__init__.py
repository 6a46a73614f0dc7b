from stockly.models.kv_entry import KeyValueEntry  # noqa: F401
