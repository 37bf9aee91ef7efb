from sqlmodel import SQLModel, create_engine, Session, select
from sqlalchemy.pool import StaticPool
from app.config import settings
from app.constants.order_status import ORDER_STATUS_NAMES


def build_engine(url: str):
    if url.startswith("sqlite"):
        # single shared connection so in-memory databases survive across sessions
        return create_engine(
            url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    return create_engine(
        url,
        echo=False,
        pool_pre_ping=True,      # checks dead connections
        pool_recycle=1800        # refresh every 30 min
    )


engine = build_engine(settings.database_url)


def seed_order_statuses(session: Session):
    from app.models.order_status import OrderStatus

    existing = set(session.exec(select(OrderStatus.id)).all())
    for status_id, name in ORDER_STATUS_NAMES.items():
        if status_id not in existing:
            session.add(OrderStatus(id=status_id, name=name))
    session.commit()


def create_db_and_tables(bind=None):
    from app.models import user, book, payment_provider, order_status, order, order_item, shipment
    bind = bind or engine
    SQLModel.metadata.create_all(bind)
    with Session(bind) as session:
        seed_order_statuses(session)


def get_session():
    with Session(engine) as session:
        yield session
