from __future__ import annotations

import pytest

from bloc.config import DEFAULT_HELP_MESSAGE, EditorConfig


def test_defaults_match_editor_layout() -> None:
    config = EditorConfig()

    assert config.gutter_width == 5
    assert config.reserved_y == 2
    assert config.escape_timeout == pytest.approx(0.1)
    assert config.help_message == DEFAULT_HELP_MESSAGE


def test_from_env_reads_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLOC_RESERVED_X", "6")
    monkeypatch.setenv("BLOC_INDENT_X", "2")
    monkeypatch.setenv("BLOC_ESCAPE_TIMEOUT_MS", "250")
    monkeypatch.setenv("BLOC_MESSAGE_TIMEOUT", "1.5")
    monkeypatch.setenv("BLOC_DISABLE_BINDINGS", "goto, quit,,")

    config = EditorConfig.from_env()

    assert config.gutter_width == 8
    assert config.escape_timeout == pytest.approx(0.25)
    assert config.message_timeout_s == pytest.approx(1.5)
    assert config.disabled_bindings == ("goto", "quit")


def test_from_env_ignores_unparseable_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLOC_RESERVED_X", "wide")
    monkeypatch.setenv("BLOC_MESSAGE_TIMEOUT", "soon")
    monkeypatch.delenv("BLOC_DISABLE_BINDINGS", raising=False)

    config = EditorConfig.from_env(help_message="custom help")

    assert config.reserved_x == 4
    assert config.message_timeout_s == pytest.approx(5.0)
    assert config.disabled_bindings == ()
    assert config.help_message == "custom help"


@pytest.mark.parametrize(
    "overrides",
    [
        {"reserved_x": -1},
        {"indent_x": -1},
        {"reserved_y": -1},
        {"escape_timeout_ms": 0},
    ],
)
def test_invalid_geometry_rejected(overrides: dict) -> None:
    with pytest.raises(ValueError):
        EditorConfig(**overrides)
