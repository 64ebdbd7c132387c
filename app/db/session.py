from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from app.core.config import settings
from app.core.errors import ConflictError

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=connect_args,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def commit_or_conflict(db: Session, message: str) -> None:
    """Commit, turning a unique-index violation into a ConflictError.

    Application-level duplicate checks run first; this catches the race
    where two requests pass that check at the same time.
    """
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(message)
