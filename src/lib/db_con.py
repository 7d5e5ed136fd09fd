from sqlmodel import Session, SQLModel, create_engine

from src.config import DATABASE_URL, DB_ECHO

connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    # FastAPI runs sync routes in a threadpool
    connect_args = {"check_same_thread": False}

engine = create_engine(DATABASE_URL, echo=DB_ECHO, connect_args=connect_args)


def create_db_and_tables():
    # register every table on the metadata before create_all
    import src.api.models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session():
    with Session(engine) as session:
        yield session
