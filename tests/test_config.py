"""ClientConfig と load_config のユニットテスト"""

from pathlib import Path

import pytest
from k1s0_es_client.config import ClientConfig, load_config
from k1s0_es_client.exceptions import ConfigError, ConfigErrorCodes
from pydantic import ValidationError


def test_defaults() -> None:
    config = ClientConfig()
    assert config.base_url == "http://localhost:9200"
    assert config.timeout_seconds == 30.0


def test_port_out_of_range() -> None:
    with pytest.raises(ValidationError):
        ClientConfig(port=70000)


def test_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        ClientConfig(timeout_seconds=0)


def test_load_section(tmp_path: Path) -> None:
    """The elasticsearch: section is used when present."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "app:\n  name: svc\nelasticsearch:\n  host: es.local\n  port: 9201\n  scheme: https\n"
    )
    config = load_config(config_file)
    assert config.base_url == "https://es.local:9201"


def test_load_whole_document(tmp_path: Path) -> None:
    config_file = tmp_path / "es.yaml"
    config_file.write_text("host: search\ntimeout_seconds: 2.5\n")
    config = load_config(config_file)
    assert config.host == "search"
    assert config.timeout_seconds == 2.5


def test_load_file_not_found(tmp_path: Path) -> None:
    with pytest.raises(ConfigError) as exc_info:
        load_config(tmp_path / "missing.yaml")
    assert exc_info.value.code == ConfigErrorCodes.READ_FILE


def test_load_invalid_yaml(tmp_path: Path) -> None:
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text("host: {invalid: yaml: content:\n")
    with pytest.raises(ConfigError) as exc_info:
        load_config(bad_file)
    assert exc_info.value.code == ConfigErrorCodes.PARSE_YAML


def test_load_validation_error(tmp_path: Path) -> None:
    bad_config = tmp_path / "bad_config.yaml"
    bad_config.write_text("elasticsearch:\n  port: 99999\n")
    with pytest.raises(ConfigError) as exc_info:
        load_config(bad_config)
    assert exc_info.value.code == ConfigErrorCodes.VALIDATION
