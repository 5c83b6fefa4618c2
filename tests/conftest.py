"""
Shared fixtures: a temporary SQLite database, two seeded accounts and a
recording email channel.
"""

import asyncio
import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("AUTH_SECRET", "test-secret")
os.environ["RESEND_API_KEY"] = ""

from datetime import date, timedelta
from typing import Any, Dict, List

import pytest

from invoicer.application.dto.invoice_dto import CreateInvoiceRequestDTO
from invoicer.application.use_cases.base_use_case import CurrentIdentity
from invoicer.domain.services.email_service import EmailDeliveryChannel, DeliveryResult
from invoicer.infrastructure.db.database import create_engine_for, create_session_factory, init_models
from invoicer.infrastructure.db.models import UserModel
from invoicer.infrastructure.repositories import (
    SQLAlchemyInvoiceRepository,
    SQLAlchemySettingsRepository,
    SQLAlchemyUserRepository,
)


ACCOUNT_A = "11111111-1111-1111-1111-111111111111"
ACCOUNT_B = "22222222-2222-2222-2222-222222222222"


class RecordingEmailChannel(EmailDeliveryChannel):
    """Delivery channel double that records every call."""

    def __init__(self, result: DeliveryResult = None):
        self.result = result or DeliveryResult.delivered("msg_123")
        self.calls: List[Dict[str, str]] = []

    async def send(self, sender: str, to: str, subject: str, html: str) -> DeliveryResult:
        self.calls.append({"sender": sender, "to": to, "subject": subject, "html": html})
        return self.result


def build_invoice_payload(**overrides: Any) -> Dict[str, Any]:
    """JSON body of a valid invoice form."""
    today = date.today()
    payload = {
        "invoice_no": "INV-001",
        "invoice_date": today.isoformat(),
        "due_date": (today + timedelta(days=14)).isoformat(),
        "currency": "USD",
        "from": {
            "name": "Acme Studio",
            "email": "billing@acme.example.com",
            "address1": "1 Main Street",
        },
        "to": {
            "name": "Jane Client",
            "email": "jane@client.example.com",
            "address1": "42 Side Road",
            "address2": "Suite 5",
        },
        "items": [
            {"item_name": "Design", "quantity": 2, "price": 10, "total": 20},
        ],
        "sub_total": 20,
        "discount": 0,
        "tax_percentage": 0,
        "total": 20,
        "notes": "Thank you",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def invoice_payload():
    return build_invoice_payload


@pytest.fixture
def invoice_form():
    """Factory for validated create-invoice DTOs."""
    def factory(**overrides: Any) -> CreateInvoiceRequestDTO:
        return CreateInvoiceRequestDTO.model_validate(build_invoice_payload(**overrides))
    return factory


async def seed_accounts(session_factory) -> None:
    async with session_factory() as session:
        async with session.begin():
            session.add_all([
                UserModel(id=ACCOUNT_A, email="a@example.com", first_name="Alice", currency="USD"),
                UserModel(id=ACCOUNT_B, email="b@example.com", first_name="Bob", currency="EUR"),
            ])


@pytest.fixture
async def engine(tmp_path):
    engine = create_engine_for(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
async def session_factory(engine):
    factory = create_session_factory(engine)
    await seed_accounts(factory)
    return factory


@pytest.fixture
def identity_a() -> CurrentIdentity:
    return CurrentIdentity(id=ACCOUNT_A, email="a@example.com", first_name="Alice")


@pytest.fixture
def identity_b() -> CurrentIdentity:
    return CurrentIdentity(id=ACCOUNT_B, email="b@example.com", first_name="Bob")


@pytest.fixture
def invoice_repository(session_factory) -> SQLAlchemyInvoiceRepository:
    return SQLAlchemyInvoiceRepository(session_factory)


@pytest.fixture
def settings_repository(session_factory) -> SQLAlchemySettingsRepository:
    return SQLAlchemySettingsRepository(session_factory)


@pytest.fixture
def user_repository(session_factory) -> SQLAlchemyUserRepository:
    return SQLAlchemyUserRepository(session_factory)


@pytest.fixture
def email_channel() -> RecordingEmailChannel:
    return RecordingEmailChannel()


@pytest.fixture
def api_client(tmp_path, email_channel):
    """
    TestClient bound to a fresh seeded database and the recording email channel.
    The application lifespan is not run.
    """
    from fastapi.testclient import TestClient

    from invoicer.infrastructure.db.database import get_session_factory
    from invoicer.infrastructure.email.resend_client import get_email_channel
    from invoicer.main import app

    engine = create_engine_for(f"sqlite+aiosqlite:///{tmp_path / 'api.db'}")
    factory = create_session_factory(engine)
    asyncio.run(init_models(engine))
    asyncio.run(seed_accounts(factory))

    app.dependency_overrides[get_session_factory] = lambda: factory
    app.dependency_overrides[get_email_channel] = lambda: email_channel

    yield TestClient(app)

    app.dependency_overrides.clear()
    asyncio.run(engine.dispose())


def auth_headers(account_id: str, email: str, **claims: Any) -> Dict[str, str]:
    from invoicer.infrastructure.auth.jwt_handler import JWTHandler

    token = JWTHandler().create_access_token(account_id, email=email, **claims)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def headers_a() -> Dict[str, str]:
    return auth_headers(ACCOUNT_A, "a@example.com")


@pytest.fixture
def headers_b() -> Dict[str, str]:
    return auth_headers(ACCOUNT_B, "b@example.com")


@pytest.fixture
def make_headers():
    return auth_headers
