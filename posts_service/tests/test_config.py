from __future__ import annotations

from pathlib import Path

import pytest

from posts_service.app.config import CONFIG_PATH_ENV, AppConfig, load_config, parse_config


def test_parse_config_reads_all_sections(tmp_path: Path) -> None:
    config = parse_config(
        {
            "posts": {"page_size": "12"},
            "auth": {"token_expire_minutes": 30, "jwt_algorithm": "HS512"},
            "cors": {"allow_origins": ["http://localhost:3000", " "]},
        },
        tmp_path / "config.yaml",
    )

    assert config.posts.page_size == 12
    assert config.auth.token_expire_minutes == 30
    assert config.auth.jwt_algorithm == "HS512"
    assert config.cors.allow_origins == ["http://localhost:3000"]


def test_parse_config_defaults_for_empty_mapping(tmp_path: Path) -> None:
    assert parse_config({}, tmp_path / "config.yaml") == AppConfig()


@pytest.mark.parametrize(
    "data",
    [
        {"posts": {"page_size": "many"}},
        {"posts": {"page_size": 0}},
        {"posts": {"page_size": 101}},
        {"auth": {"token_expire_minutes": 0}},
        {"cors": {"allow_origins": "*"}},
    ],
)
def test_parse_config_rejects_invalid_values(tmp_path: Path, data: dict) -> None:
    with pytest.raises(RuntimeError):
        parse_config(data, tmp_path / "config.yaml")


def test_load_config_from_explicit_path(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "custom.yaml"
    path.write_text("posts:\n  page_size: 3\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_PATH_ENV, str(path))

    assert load_config().posts.page_size == 3


def test_load_config_missing_explicit_path_fails(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(CONFIG_PATH_ENV, str(tmp_path / "absent.yaml"))

    with pytest.raises(RuntimeError):
        load_config()


def test_load_config_without_file_uses_defaults(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    monkeypatch.chdir(tmp_path)

    assert load_config() == AppConfig()
