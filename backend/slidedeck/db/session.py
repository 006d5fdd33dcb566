from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from slidedeck.core.config import settings

if settings.DATABASE_URL.startswith("sqlite"):
    # FastAPI runs sync endpoints in a threadpool
    engine_kwargs = {"connect_args": {"check_same_thread": False}}
else:
    engine_kwargs = {"pool_size": 5, "max_overflow": 10}

engine = create_engine(
    settings.DATABASE_URL,
    future=True,
    pool_pre_ping=True,
    echo=settings.SQL_ECHO,
    **engine_kwargs,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
