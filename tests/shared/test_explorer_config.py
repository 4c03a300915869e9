"""Tests for pydantic-settings-backed explorer configuration loading."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from packages.explorer_shared.config import (
    ReentrancyPolicy,
    load_settings,
    resolve_component_settings,
)
from services.selection.auth_state.config import (
    AuthStateSettings,
    resolve_auth_state_settings,
)
from services.selection.service_selector.config import (
    resolve_service_selector_settings,
)


@pytest.fixture(autouse=True)
def _clear_explorer_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment variables out of precedence assertions."""
    for key in list(os.environ):
        if key.startswith("EXPLORER_"):
            monkeypatch.delenv(key)


def test_load_settings_uses_explorer_precedence_cascade(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Init params should override env, env should override YAML, then defaults."""
    config_file = tmp_path / "explorer.yaml"
    config_file.write_text(
        "\n".join(
            [
                "logging:",
                "  level: WARNING",
                "channel:",
                "  max_deferred_rounds: 8",
                "components:",
                "  selector:",
                "    auth:",
                "      oauth_key: yaml_key",
                "    service:",
                "      excluded_services: [discovery, books]",
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("EXPLORER_LOGGING__LEVEL", "ERROR")
    monkeypatch.setenv("EXPLORER_CHANNEL__REENTRANCY_POLICY", "warn")

    settings = load_settings(
        cli_params={"logging": {"level": "DEBUG"}},
        config_path=config_file,
    )

    auth = resolve_auth_state_settings(settings)
    selector = resolve_service_selector_settings(settings)

    assert settings.logging.level == "DEBUG"
    assert settings.channel.reentrancy_policy is ReentrancyPolicy.WARN
    assert settings.channel.max_deferred_rounds == 8
    assert auth.oauth_key == "yaml_key"
    assert auth.scope_url_prefix == "https://www.googleapis.com/auth/"
    assert selector.excluded_services == frozenset({"discovery", "books"})


def test_load_settings_uses_model_defaults_when_sources_missing(tmp_path: Path) -> None:
    """Settings should fall back to model defaults when env and YAML are absent."""
    settings = load_settings(config_path=tmp_path / "explorer.yaml")

    assert settings.logging.service == "api_explorer"
    assert settings.logging.level == "INFO"
    assert settings.channel.reentrancy_policy is ReentrancyPolicy.FORBID
    assert settings.channel.max_deferred_rounds == 64
    assert resolve_auth_state_settings(settings) == AuthStateSettings()
    assert resolve_service_selector_settings(settings).excluded_services == frozenset(
        {"discovery"}
    )


def test_flat_component_keys_are_rejected(tmp_path: Path) -> None:
    """Component settings must be grouped by kind."""
    with pytest.raises(ValidationError, match="components.selector.auth"):
        load_settings(
            cli_params={"components": {"selector_auth": {"oauth_key": "x"}}},
            config_path=tmp_path / "explorer.yaml",
        )


def test_resolve_component_settings_rejects_malformed_ids(tmp_path: Path) -> None:
    """Component ids are <kind>_<name> with a known kind."""
    settings = load_settings(config_path=tmp_path / "explorer.yaml")

    with pytest.raises(ValueError):
        resolve_component_settings(
            settings=settings,
            component_id="widget_auth",
            model=AuthStateSettings,
        )


def test_unknown_component_keys_fail_validation(tmp_path: Path) -> None:
    """Component models forbid extra keys so typos surface early."""
    settings = load_settings(
        cli_params={"components": {"selector": {"auth": {"oauth_kye": "x"}}}},
        config_path=tmp_path / "explorer.yaml",
    )

    with pytest.raises(ValidationError):
        resolve_auth_state_settings(settings)


def test_max_deferred_rounds_must_be_positive(tmp_path: Path) -> None:
    """A zero round limit could never settle anything."""
    with pytest.raises(ValidationError):
        load_settings(
            cli_params={"channel": {"max_deferred_rounds": 0}},
            config_path=tmp_path / "explorer.yaml",
        )
