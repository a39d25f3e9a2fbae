import json

import pytest

from bf_trace.config import EngineConfig, load_config


def test_defaults_are_unbounded():
    config = EngineConfig()
    assert config.execution_limit == 0
    assert config.memory_limit == 0


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        EngineConfig(execution_limit=-1)


def test_from_env():
    config = EngineConfig.from_env({"BF_EXECUTION_LIMIT": "50", "BF_MEMORY_LIMIT": ""})
    assert config == EngineConfig(execution_limit=50, memory_limit=0)


def test_from_env_rejects_garbage():
    with pytest.raises(ValueError):
        EngineConfig.from_env({"BF_MEMORY_LIMIT": "lots"})


def test_from_process_environment(monkeypatch):
    monkeypatch.setenv("BF_MEMORY_LIMIT", "16")
    monkeypatch.delenv("BF_EXECUTION_LIMIT", raising=False)
    assert EngineConfig.from_env() == EngineConfig(memory_limit=16)


def test_merged_ignores_none():
    config = EngineConfig(execution_limit=5, memory_limit=7).merged(execution_limit=None, memory_limit=3)
    assert config == EngineConfig(execution_limit=5, memory_limit=3)


def test_load_yaml(tmp_path):
    path = tmp_path / "limits.yaml"
    path.write_text("limits:\n  execution_limit: 1000\n  memory_limit: 64\n")
    assert load_config(str(path)) == EngineConfig(execution_limit=1000, memory_limit=64)


def test_load_json_keeps_base_for_missing_keys(tmp_path):
    path = tmp_path / "limits.json"
    path.write_text(json.dumps({"memory_limit": 8}))
    config = load_config(str(path), base=EngineConfig(execution_limit=20))
    assert config == EngineConfig(execution_limit=20, memory_limit=8)


def test_unknown_keys_rejected(tmp_path):
    path = tmp_path / "limits.yml"
    path.write_text("step_limit: 5\n")
    with pytest.raises(ValueError, match="Unknown config keys"):
        load_config(str(path))


def test_non_mapping_rejected(tmp_path):
    path = tmp_path / "limits.yml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_broken_yaml_is_a_value_error(tmp_path):
    path = tmp_path / "limits.yaml"
    path.write_text("limits: [unclosed\n")
    with pytest.raises(ValueError, match="Failed to parse"):
        load_config(str(path))


@pytest.mark.parametrize("value", [None, 1.5, True, "10"])
def test_non_integer_values_rejected(value):
    with pytest.raises(ValueError, match="execution_limit"):
        EngineConfig.from_mapping({"execution_limit": value})


def test_empty_yaml_value_is_a_value_error(tmp_path):
    path = tmp_path / "limits.yaml"
    path.write_text("execution_limit:\n")
    with pytest.raises(ValueError):
        load_config(str(path))
