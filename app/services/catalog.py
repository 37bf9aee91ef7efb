import logging
from typing import Dict, Iterable, List

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.errors import InfrastructureError
from app.models.book import Book

logger = logging.getLogger(__name__)


class SqlCatalog:
    """Read-only view of the book catalog used to price a checkout."""

    def __init__(self, session: Session):
        self.session = session

    def _query(self, book_ids: List[int]) -> List[Book]:
        return self.session.exec(
            select(Book).where(Book.id.in_(book_ids))
        ).all()

    def fetch_books(self, book_ids: Iterable[int]) -> Dict[int, Book]:
        ids = sorted(set(book_ids))

        try:
            books = self._query(ids)
        except SQLAlchemyError:
            logger.exception(f"Failed to fetch books {ids}")
            raise InfrastructureError("Failed to fetch book data")

        logger.info(f"Fetched {len(books)} of {len(ids)} requested books")
        return {book.id: book for book in books}
