import pytest
from fastapi.testclient import TestClient

from social_media_api.app.core.config import Settings
from social_media_api.app.core.db import init_db
from social_media_api.app.main import create_app
from social_media_api.app.repositories import AccountRepository, MessageRepository
from social_media_api.app.schemas.account import Account
from social_media_api.app.services.account_service import AccountService
from social_media_api.app.services.message_service import MessageService


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def db_path(tmp_path):
    path = str(tmp_path / "social_media.db")
    init_db(path)
    return path


@pytest.fixture
def accounts(db_path):
    return AccountRepository(db_path)


@pytest.fixture
def messages(db_path):
    return MessageRepository(db_path)


@pytest.fixture
def account_service(accounts):
    return AccountService(accounts)


@pytest.fixture
def message_service(messages, accounts):
    return MessageService(messages, accounts)


@pytest.fixture
def bob(accounts):
    return accounts.insert(Account(username="bob", password="pass1"))


@pytest.fixture
def client(tmp_path):
    app = create_app(Settings(database_url=str(tmp_path / "api.db")))
    with TestClient(app) as test_client:
        yield test_client
