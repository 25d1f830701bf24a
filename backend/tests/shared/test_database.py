"""Tests for shared/database.py."""

import pytest
from unittest.mock import patch, MagicMock

from shared.database import get_supabase_client, reset_client_cache


class TestSupabaseClient:
    def setup_method(self):
        """Reset cache before each test."""
        reset_client_cache()

    def teardown_method(self):
        reset_client_cache()

    @patch("shared.database.ClientOptions")
    @patch("shared.database.create_client")
    @patch("shared.database.get_settings")
    def test_creates_client_with_timeout(self, mock_settings, mock_create, mock_options):
        """Should create the service-role client with the configured timeout."""
        mock_settings.return_value.supabase_url = "https://test.supabase.co"
        mock_settings.return_value.supabase_service_role_key = "test-key"
        mock_settings.return_value.db_timeout_seconds = 7.5
        mock_create.return_value = MagicMock()

        client = get_supabase_client()

        mock_options.assert_called_once_with(postgrest_client_timeout=7.5)
        mock_create.assert_called_once_with(
            "https://test.supabase.co",
            "test-key",
            options=mock_options.return_value,
        )
        assert client is mock_create.return_value

    @patch("shared.database.ClientOptions")
    @patch("shared.database.create_client")
    @patch("shared.database.get_settings")
    def test_caches_client(self, mock_settings, mock_create, mock_options):
        """Should cache the client and not recreate it."""
        mock_settings.return_value.supabase_url = "https://test.supabase.co"
        mock_settings.return_value.supabase_service_role_key = "test-key"

        client1 = get_supabase_client()
        client2 = get_supabase_client()

        mock_create.assert_called_once()
        assert client1 is client2

    @pytest.mark.parametrize(
        "url,key",
        [("", ""), ("", "test-key"), ("https://test.supabase.co", "")],
    )
    @patch("shared.database.get_settings")
    def test_raises_without_config(self, mock_settings, url, key):
        """Should raise if URL or service role key is missing."""
        mock_settings.return_value.supabase_url = url
        mock_settings.return_value.supabase_service_role_key = key

        with pytest.raises(RuntimeError, match="configuration missing"):
            get_supabase_client()

    @patch("shared.database.ClientOptions")
    @patch("shared.database.create_client")
    @patch("shared.database.get_settings")
    def test_reset_client_cache(self, mock_settings, mock_create, mock_options):
        """Should reset the cache and allow new client creation."""
        mock_settings.return_value.supabase_url = "https://test.supabase.co"
        mock_settings.return_value.supabase_service_role_key = "test-key"
        mock_create.side_effect = [MagicMock(name="client1"), MagicMock(name="client2")]

        client1 = get_supabase_client()
        reset_client_cache()
        client2 = get_supabase_client()

        assert mock_create.call_count == 2
        assert client1 is not client2
