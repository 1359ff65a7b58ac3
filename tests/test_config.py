"""Tests for settings loading."""

from pathlib import Path

from nutrition_store.config import Settings


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("NUTRITION_STORE_STORAGE_PATH", raising=False)

    settings = Settings()

    assert settings.storage_path is None
    assert settings.key_namespace == "nutritionTracker_"
    assert settings.erase_custom_foods is False


def test_settings_from_environment(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("NUTRITION_STORE_STORAGE_PATH", str(tmp_path / "db.json"))
    monkeypatch.setenv("NUTRITION_STORE_KEY_NAMESPACE", "test_")
    monkeypatch.setenv("NUTRITION_STORE_ERASE_CUSTOM_FOODS", "true")

    settings = Settings()

    assert settings.storage_path == Path(tmp_path / "db.json")
    assert settings.key_namespace == "test_"
    assert settings.erase_custom_foods is True
