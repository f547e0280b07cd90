from unittest.mock import patch

from app.core import supabase_client


def test_prefers_service_role_client():
    with patch.object(supabase_client, "supabase_admin", return_value="admin") as admin:
        assert supabase_client.get_supabase() == "admin"
    admin.assert_called_once()


def test_falls_back_to_anon_client_without_service_key():
    with (
        patch.object(supabase_client.settings, "SUPABASE_SERVICE_ROLE_KEY", None),
        patch.object(supabase_client, "supabase_public", return_value="public"),
    ):
        assert supabase_client.get_supabase() == "public"
