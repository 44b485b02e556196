"""Bookmark model - the single table behind the bookmarks API."""
from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base


class Bookmark(Base):
    """A saved link with a 1-5 rating and a free-form description."""

    __tablename__ = "bookmark_table"
    # Ids are never reused after a delete (SQLite otherwise recycles max(id)+1)
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text)
    url: Mapped[str] = mapped_column(String(2083))
    rating: Mapped[int] = mapped_column(Integer)
    description: Mapped[str] = mapped_column(Text)
