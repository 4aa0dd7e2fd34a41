"""Tests for `gomodwhy.config`."""

from gomodwhy.config import DEFAULT_CONFIG, WhyConfig


def test_defaults() -> None:
    config = WhyConfig()
    assert config.pattern == "."
    assert config.max_depth == 0
    assert config.go_command == "go"
    assert config.include_test is False
    assert DEFAULT_CONFIG == config


def test_from_env_overrides() -> None:
    config = WhyConfig.from_env(
        {"GOMODWHY_GO": "/opt/go/bin/go", "GOMODWHY_PATTERN": "./cmd/..."}
    )
    assert config.go_command == "/opt/go/bin/go"
    assert config.pattern == "./cmd/..."


def test_from_env_ignores_blank_and_unrelated() -> None:
    config = WhyConfig.from_env({"GOMODWHY_GO": "  ", "GOPATH": "/x"})
    assert config == WhyConfig()


def test_from_env_reads_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("GOMODWHY_GO", "go-tip")
    monkeypatch.delenv("GOMODWHY_PATTERN", raising=False)
    assert WhyConfig.from_env().go_command == "go-tip"
