import os

# must be set before src.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import src.api.models  # noqa: F401
from src.api.core.csv_parser import REQUIRED_COLUMNS
from src.api.core.security import create_access_token
from src.lib.db_con import get_session
from src.main import app


# rows as parse_csv hands them over, booleans already normalised
DEFAULT_ROW = {
    "Product Name": "Garam Masala",
    "Description": "Roasted whole spice blend",
    "Ingredients": "Cumin, coriander, cardamom",
    "Price": "450",
    "Discount (%)": "10",
    "Slug": "garam-masala",
    "Active": "true",
    "Out of Stock": "false",
    "Featured": "true",
    "Top Selling": "false",
    "New Arrival": "false",
    "Best Selling": "false",
    "Special": "false",
    "Grocery": "true",
    "Brand": "Shan",
    "Categories": "Spices, Masala Blends",
    "Images": "garam-1.png,garam-2.png",
    "Variant SKU": "GM-100",
    "Variant Label": "100g",
    "Variant Slug": "garam-masala-100g",
    "Variant Price": "450",
    "Variant Discount (%)": "10",
    "Variant Stock": "40",
    "Variant Active": "true",
    "Variant Out of Stock": "false",
}


def _csv_cell(value: str) -> str:
    if "," in value:
        return f'"{value}"'
    return value


@pytest.fixture
def make_row():
    def _make_row(**overrides):
        row = dict(DEFAULT_ROW)
        row.update(overrides)
        return row

    return _make_row


@pytest.fixture
def make_csv():
    def _make_csv(*rows):
        lines = [",".join(REQUIRED_COLUMNS)]
        for row in rows:
            lines.append(",".join(_csv_cell(row[col]) for col in REQUIRED_COLUMNS))
        return "\n".join(lines) + "\n"

    return _make_csv


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def _override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


def _auth_headers(user: dict) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user)}"}


@pytest.fixture
def admin_headers():
    return _auth_headers({"id": 1, "email": "admin@example.com", "role": "admin"})


@pytest.fixture
def customer_headers():
    return _auth_headers({"id": 7, "email": "buyer@example.com", "role": "customer"})
