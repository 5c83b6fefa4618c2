"""
Integration tests for the account use cases.
"""

from invoicer.application.dto.user_dto import UpdateUserRequestDTO
from invoicer.application.use_cases.base_use_case import CurrentIdentity
from invoicer.application.use_cases.user_use_cases import (
    GetCurrentUserUseCase,
    SyncAccountUseCase,
    UpdateUserUseCase,
)


class TestAccountUseCases:

    async def test_current_user(self, user_repository, identity_b):
        result = await GetCurrentUserUseCase(user_repository).execute(identity_b)

        assert result.success
        assert result.data["email"] == "b@example.com"
        assert result.data["currency"] == "EUR"
        assert result.data["role"] == "USER"

    async def test_unknown_user(self, user_repository):
        result = await GetCurrentUserUseCase(user_repository).execute(CurrentIdentity(id="nobody"))

        assert result.success
        assert result.data is None

    async def test_update_profile(self, user_repository, identity_a):
        result = await UpdateUserUseCase(user_repository).execute(
            identity_a, UpdateUserRequestDTO(last_name="Smith", currency="gbp")
        )

        assert result.success, result.error
        assert result.data["first_name"] == "Alice"
        assert result.data["last_name"] == "Smith"
        assert result.data["currency"] == "GBP"

    async def test_update_unknown_user(self, user_repository):
        result = await UpdateUserUseCase(user_repository).execute(
            CurrentIdentity(id="nobody"), UpdateUserRequestDTO(first_name="X")
        )

        assert result.error == "User not found"


class TestSyncAccount:

    async def test_provisions_new_account(self, user_repository):
        identity = CurrentIdentity(
            id="33333333-3333-3333-3333-333333333333",
            email="carol@example.com",
            name="Carol Danvers",
            image="https://img.example.com/carol.png",
        )

        result = await SyncAccountUseCase(user_repository).execute(identity)

        assert result.success, result.error
        assert result.data["id"] == identity.id
        assert result.data["first_name"] == "Carol"
        assert result.data["last_name"] == "Danvers"
        assert result.data["currency"] == "USD"
        assert (await user_repository.find_by_id(identity.id)).email == "carol@example.com"

    async def test_existing_account_is_returned(self, user_repository, identity_a):
        identity = CurrentIdentity(id=identity_a.id, email="A@Example.com", name="Someone Else")

        result = await SyncAccountUseCase(user_repository).execute(identity)

        assert result.data["id"] == identity_a.id
        assert result.data["first_name"] == "Alice"

    async def test_email_required(self, user_repository):
        result = await SyncAccountUseCase(user_repository).execute(CurrentIdentity(id="x"))

        assert result.error == "Email is required"
