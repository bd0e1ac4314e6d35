# database.py
from sqlalchemy import (
    create_engine,
    Column,
    Integer,
    String,
    Float,
    DateTime,
    ForeignKey,
    func,
)
from sqlalchemy.orm import sessionmaker, declarative_base
from config import DATABASE_URL

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


class User(Base):
    __tablename__ = "users"
    id = Column(String, primary_key=True, unique=True, index=True)
    password = Column(String, nullable=False)
    monthly_budget = Column(Float, nullable=False, default=0.0)
    fcm_token = Column(String, nullable=True)


class Transaction(Base):
    __tablename__ = "transactions"
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    type = Column(String, nullable=False)
    category = Column(String, index=True)
    amount = Column(Float, nullable=False)
    date = Column(DateTime, nullable=False, index=True)
    description = Column(String, nullable=True)


def init_db(bind=None):
    Base.metadata.create_all(bind=bind or engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def sum_by_type(db, user_id, start, end):
    """Return ``(income, expenses)`` for a user's transactions dated in [start, end].

    Any type other than ``income`` is counted as an expense.
    """
    totals = (
        db.query(Transaction.type, func.sum(Transaction.amount).label("total"))
        .filter(
            Transaction.user_id == user_id,
            Transaction.date >= start,
            Transaction.date <= end,
        )
        .group_by(Transaction.type)
        .all()
    )

    income = 0.0
    expenses = 0.0
    for tx_type, total in totals:
        if tx_type == "income":
            income += total or 0.0
        else:
            expenses += total or 0.0
    return income, expenses


def iter_users(db, page_size=100):
    """Yield every user, fetched in pages of ``page_size`` ordered by id."""
    last_id = None
    while True:
        query = db.query(User).order_by(User.id)
        if last_id is not None:
            query = query.filter(User.id > last_id)
        page = query.limit(page_size).all()
        if not page:
            return
        yield from page
        if len(page) < page_size:
            return
        last_id = page[-1].id
