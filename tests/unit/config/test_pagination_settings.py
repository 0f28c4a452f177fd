"""Unit tests for pagination settings and loaders."""

from __future__ import annotations

from pathlib import Path

import pytest

from simple_pagination.config.settings import DotenvSettingsLoader, EnvSettingsLoader, PaginationSettings
from simple_pagination.config.validation import ConfigError, InvalidSettingValueError


class TestPaginationSettings:
    def test_defaults(self) -> None:
        s = PaginationSettings()
        assert s.per_page_items == [5, 10, 20, 0]
        assert s.default_per_page == 10
        assert s.window_delta == 1
        assert s.strict_params is False
        assert s.default_order_field == "id"

    def test_negative_item_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            PaginationSettings(per_page_items=[5, -1])
        assert exc_info.value.setting_name == "per_page_items"

    def test_negative_delta_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            PaginationSettings(window_delta=-1)

    def test_negative_default_rejected(self) -> None:
        with pytest.raises(ConfigError):
            PaginationSettings(default_per_page=-3)


class TestEnvSettingsLoader:
    def test_defaults_without_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("PER_PAGE_ITEMS", "DEFAULT_PER_PAGE", "WINDOW_DELTA", "STRICT_PARAMS", "DEFAULT_ORDER_FIELD"):
            monkeypatch.delenv(f"PAGINATION_{name}", raising=False)
        assert EnvSettingsLoader().load(PaginationSettings) == PaginationSettings()

    def test_loads_int_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAGINATION_PER_PAGE_ITEMS", "5, 25,0")
        assert EnvSettingsLoader().load(PaginationSettings).per_page_items == [5, 25, 0]

    def test_loads_scalars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAGINATION_WINDOW_DELTA", "2")
        monkeypatch.setenv("PAGINATION_STRICT_PARAMS", "yes")
        monkeypatch.setenv("PAGINATION_DEFAULT_ORDER_FIELD", "title")
        s = EnvSettingsLoader().load(PaginationSettings)
        assert s.window_delta == 2
        assert s.strict_params is True
        assert s.default_order_field == "title"

    def test_malformed_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAGINATION_WINDOW_DELTA", "two")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(PaginationSettings)
        assert exc_info.value.setting_name == "PAGINATION_WINDOW_DELTA"

    def test_validation_error_not_wrapped(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAGINATION_WINDOW_DELTA", "-2")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(PaginationSettings)


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("PAGINATION_DEFAULT_PER_PAGE", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("PAGINATION_DEFAULT_PER_PAGE=30\n")
        try:
            s = DotenvSettingsLoader(str(env_file)).load(PaginationSettings)
            assert s.default_per_page == 30
        finally:
            monkeypatch.delenv("PAGINATION_DEFAULT_PER_PAGE", raising=False)
