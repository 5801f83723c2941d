"""Unit tests for application settings configuration."""

from pathlib import Path

from inventory_dashboard.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_base_url_trailing_slash_is_removed():
    settings = Settings(living_apps_base_url="https://store.test/rest/")
    assert settings.living_apps_base_url == "https://store.test/rest"


def test_collection_ids_are_24_hex_chars():
    settings = Settings()
    for app_id in (
        settings.inventory_items_app_id,
        settings.categories_app_id,
        settings.locations_app_id,
    ):
        assert len(app_id) == 24
        int(app_id, 16)
