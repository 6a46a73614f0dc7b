from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from stockly.database import Base


class KeyValueEntry(Base):
    __tablename__ = "kv_store"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[list] = mapped_column(JSON, default=list)
