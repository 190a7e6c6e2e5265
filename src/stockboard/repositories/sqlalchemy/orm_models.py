"""SQLAlchemy ORM model definitions."""

from sqlalchemy import BigInteger, Column, Float, String

from stockboard.repositories.sqlalchemy.database import Base


class QuoteCacheORM(Base):
    """SQLAlchemy model for a cached quote."""

    __tablename__ = "quote_cache"

    symbol = Column(String(20), primary_key=True)
    price = Column(Float, nullable=False)
    previous_close = Column(Float, nullable=False)
    change_percent = Column(Float, nullable=False)
    sector = Column(String(100), nullable=False, default="Unknown")
    fetched_at_ms = Column(BigInteger, nullable=False)
