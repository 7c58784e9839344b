import pytest
from fastapi.testclient import TestClient

from drugcatalog.config import Settings
from drugcatalog.database import create_db_engine, create_session_factory
from drugcatalog.main import create_app
from drugcatalog.schemas.responses import DrugSeedRecord
from drugcatalog.services.drug_data import ensure_indexes, replace_all

MERCK = "Merck Sharp & Dohme Corp."
JAFRA = "Jafra cosmetics International"

SEED_RECORDS = [
    {
        "code": "0006-0568",
        "genericName": "vorinostat",
        "brandName": "ZOLINZA",
        "company": MERCK,
        "launchDate": "2004-02-14T23:01:10Z",
    },
    {
        "code": "68828-192",
        "genericName": "Avobenzone, Octinoxate, Octisalate, Octocrylene",
        "brandName": "CC Cream",
        "company": JAFRA,
        "launchDate": "2011-02-02T08:57:26Z",
    },
]


@pytest.fixture
def settings():
    return Settings(database_url="sqlite://", environment="development", seed_file="")


@pytest.fixture
def engine(settings):
    engine = create_db_engine(settings)
    ensure_indexes(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = create_session_factory(engine)()
    yield session
    session.close()


@pytest.fixture
def seed_records():
    return [DrugSeedRecord(**entry) for entry in SEED_RECORDS]


@pytest.fixture
def seeded_db(db, seed_records):
    replace_all(db, seed_records)
    return db


@pytest.fixture
def app(settings, engine):
    return create_app(settings=settings, engine=engine)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client
