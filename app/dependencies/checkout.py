from fastapi import Depends
from sqlmodel import Session

from app.database import get_session
from app.services.catalog import SqlCatalog
from app.services.order_commit import SqlOrderStore


def get_catalog(session: Session = Depends(get_session)) -> SqlCatalog:
    return SqlCatalog(session)


def get_order_store(session: Session = Depends(get_session)) -> SqlOrderStore:
    return SqlOrderStore(session)
