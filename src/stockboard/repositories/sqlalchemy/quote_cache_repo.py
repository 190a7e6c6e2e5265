"""SQLAlchemy implementation of QuoteCacheBackend."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from stockboard.core.exceptions import PersistenceError
from stockboard.domain.models import CachedQuote, UNKNOWN_SECTOR
from stockboard.repositories.sqlalchemy.orm_models import QuoteCacheORM


class SqlAlchemyQuoteCacheBackend:
    """SQLAlchemy-backed quote cache; each snapshot rewrites the whole table."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def read_snapshot(self) -> dict[str, CachedQuote]:
        """Load all cached quotes."""
        try:
            with self._session_factory() as db:
                rows = db.query(QuoteCacheORM).order_by(QuoteCacheORM.symbol).all()
                return {row.symbol: self._to_domain(row) for row in rows}
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Cannot read quote cache table: {exc}") from exc

    def write_snapshot(self, entries: dict[str, CachedQuote]) -> None:
        """Replace the table contents with entries in one transaction."""
        try:
            with self._session_factory() as db:
                with db.begin():
                    db.query(QuoteCacheORM).delete()
                    db.add_all(self._to_orm(symbol, quote) for symbol, quote in entries.items())
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Cannot write quote cache table: {exc}") from exc

    @staticmethod
    def _to_domain(orm: QuoteCacheORM) -> CachedQuote:
        """Convert ORM row to domain model."""
        return CachedQuote(
            symbol=orm.symbol,
            price=float(orm.price),
            previous_close=float(orm.previous_close),
            change_percent=float(orm.change_percent),
            fetched_at_ms=int(orm.fetched_at_ms),
            sector=orm.sector or UNKNOWN_SECTOR,
        )

    @staticmethod
    def _to_orm(symbol: str, quote: CachedQuote) -> QuoteCacheORM:
        """Convert domain model to ORM row."""
        return QuoteCacheORM(
            symbol=symbol.upper(),
            price=quote.price,
            previous_close=quote.previous_close,
            change_percent=quote.change_percent,
            sector=quote.sector,
            fetched_at_ms=quote.fetched_at_ms,
        )
