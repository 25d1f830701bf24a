"""Tests for shared/repository.py."""

import httpx
import pytest
from unittest.mock import MagicMock
from postgrest.exceptions import APIError

from shared.exceptions import ConflictError, ExternalServiceError, UpstreamTimeoutError
from shared.repository import BaseRepository, is_valid_uuid


def api_error(code: str, message: str = "failed") -> APIError:
    return APIError({"code": code, "message": message, "details": None, "hint": None})


class TestIsValidUuid:
    def test_accepts_uuid(self):
        assert is_valid_uuid("3fa85f64-5717-4562-b3fc-2c963f66afa6") is True

    @pytest.mark.parametrize("value", ["", "123", "not-a-uuid", "64f1c2e9a1b2c3d4e5f60718"])
    def test_rejects_other_strings(self, value):
        """Mongo-style ids and junk are not valid keys."""
        assert is_valid_uuid(value) is False


class TestBaseRepository:
    def test_init_stores_db_client(self):
        """Should store the database client in _db attribute."""
        mock_db = MagicMock()
        repo = BaseRepository(mock_db)
        assert repo._db is mock_db

    def test_execute_returns_response(self):
        query = MagicMock()
        query.execute.return_value.data = [{"id": "1"}]

        result = BaseRepository(MagicMock())._execute(query)

        assert result.data == [{"id": "1"}]

    def test_unique_violation_becomes_conflict(self):
        query = MagicMock()
        query.execute.side_effect = api_error("23505", "duplicate key")

        with pytest.raises(ConflictError) as exc_info:
            BaseRepository(MagicMock())._execute(query)
        assert exc_info.value.code == "DUPLICATE_RECORD"

    def test_timeout_becomes_upstream_timeout(self):
        query = MagicMock()
        query.execute.side_effect = httpx.ReadTimeout("slow")

        with pytest.raises(UpstreamTimeoutError):
            BaseRepository(MagicMock())._execute(query, idempotent=True)
        # Timeouts are not retried
        assert query.execute.call_count == 1

    def test_api_error_becomes_external_service_error(self):
        query = MagicMock()
        query.execute.side_effect = api_error("42P01", "relation does not exist")

        with pytest.raises(ExternalServiceError) as exc_info:
            BaseRepository(MagicMock())._execute(query)
        assert exc_info.value.status_code == 502
        assert exc_info.value.details["service"] == "database"

    def test_connection_error_becomes_external_service_error(self):
        query = MagicMock()
        query.execute.side_effect = httpx.ConnectError("refused")

        with pytest.raises(ExternalServiceError):
            BaseRepository(MagicMock())._execute(query)

    def test_writes_are_not_retried(self):
        query = MagicMock()
        query.execute.side_effect = httpx.ConnectError("refused")

        with pytest.raises(ExternalServiceError):
            BaseRepository(MagicMock())._execute(query, idempotent=False)
        assert query.execute.call_count == 1

    def test_reads_retry_once(self):
        """An idempotent read should succeed if the second attempt does."""
        query = MagicMock()
        ok = MagicMock(data=[{"id": "1"}])
        query.execute.side_effect = [httpx.ConnectError("refused"), ok]

        result = BaseRepository(MagicMock())._execute(query, idempotent=True)

        assert result is ok
        assert query.execute.call_count == 2

    def test_reads_give_up_after_retry(self):
        query = MagicMock()
        query.execute.side_effect = httpx.ConnectError("refused")

        with pytest.raises(ExternalServiceError):
            BaseRepository(MagicMock())._execute(query, idempotent=True)
        assert query.execute.call_count == 2
