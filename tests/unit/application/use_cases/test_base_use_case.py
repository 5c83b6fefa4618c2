"""
Unit tests for the use case error boundary and result envelope.
"""

import pytest

from invoicer.application.use_cases.base_use_case import (
    BaseUseCase,
    CurrentIdentity,
    PaginatedQueryUseCase,
    UseCaseResult,
)
from invoicer.domain.models.base import (
    EntityNotFoundError,
    ValidationError,
)


class RaisingUseCase(BaseUseCase[None, dict]):
    failure_message = "Failed to do the thing"

    def __init__(self, error=None, payload=None):
        super().__init__()
        self.error = error
        self.payload = payload

    async def _execute_business_logic(self, identity, request=None):
        if self.error:
            raise self.error
        return self.payload


class PageUseCase(PaginatedQueryUseCase[None, list]):

    async def _execute_business_logic(self, identity, request):
        page, limit = request
        self._validate_page(page, limit)
        return []


IDENTITY = CurrentIdentity(id="account-1", email="a@example.com")


class TestUseCaseErrorBoundary:
    """Test cases for BaseUseCase.execute."""

    async def test_missing_identity_is_unauthorized(self):
        result = await RaisingUseCase(payload={"ok": True}).execute(None)

        assert not result.success
        assert result.error == "Unauthorized"
        assert result.error_code == "UNAUTHORIZED"

    async def test_payload_is_wrapped(self):
        result = await RaisingUseCase(payload={"ok": True}).execute(IDENTITY)

        assert result.success
        assert result.data == {"ok": True}
        assert "execution_time_seconds" in result.metadata

    async def test_not_found(self):
        result = await RaisingUseCase(EntityNotFoundError("Invoice", "abc")).execute(IDENTITY)

        assert result.error == "Invoice not found"
        assert result.error_code == "NOT_FOUND"

    async def test_validation_error_message_is_returned(self):
        result = await RaisingUseCase(ValidationError("Page must be positive")).execute(IDENTITY)

        assert result.error == "Page must be positive"
        assert result.error_code == "VALIDATION_ERROR"

    async def test_unexpected_error_uses_generic_message(self):
        result = await RaisingUseCase(RuntimeError("connection refused on 10.0.0.5")).execute(IDENTITY)

        assert not result.success
        assert result.error == "Failed to do the thing"
        assert "10.0.0.5" not in result.error
        assert result.error_code == "UPSTREAM_FAILURE"


class TestUseCaseResultEnvelope:

    def test_error_envelope(self):
        envelope = UseCaseResult.error_result("Invoice not found", "NOT_FOUND").to_envelope()

        assert envelope == {"success": False, "error": "Invoice not found"}

    def test_data_envelope(self):
        assert UseCaseResult.success_result({"id": "1"}).to_envelope() == {"success": True, "data": {"id": "1"}}

    def test_null_data_is_kept(self):
        assert UseCaseResult.success_result(None).to_envelope() == {"success": True, "data": None}

    def test_message_only_envelope(self):
        envelope = UseCaseResult.success_result(message="Email sent successfully").to_envelope()

        assert envelope == {"success": True, "message": "Email sent successfully"}

    def test_pagination_envelope(self):
        pagination = {"total": 12, "pages": 3, "page": 1, "limit": 5}

        envelope = UseCaseResult.success_result([], pagination=pagination).to_envelope()

        assert envelope == {"success": True, "data": [], "pagination": pagination}


class TestPageValidation:
    """Test cases for PaginatedQueryUseCase bounds."""

    def setup_method(self):
        self.use_case = PageUseCase(max_page_size=50)

    @pytest.mark.parametrize("page,limit,message", [
        (0, 5, "Page must be positive"),
        (1, 0, "Page size must be positive"),
        (1, 51, "Page size cannot exceed 50"),
    ])
    async def test_out_of_bounds(self, page, limit, message):
        result = await self.use_case.execute(IDENTITY, (page, limit))

        assert not result.success
        assert result.error == message

    async def test_largest_page(self):
        result = await self.use_case.execute(IDENTITY, (3, 50))

        assert result.success


class TestCurrentIdentity:

    def test_from_claims(self):
        identity = CurrentIdentity.from_claims({
            "sub": "account-1",
            "email": "a@example.com",
            "name": "Ada Lovelace",
            "picture": "https://img.example.com/a.png",
        })

        assert identity.id == "account-1"
        assert identity.image == "https://img.example.com/a.png"
        assert identity.role == "USER"
