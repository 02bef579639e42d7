"""
配置文件加载单元测试
"""
import os
import shutil
import tempfile

import pytest

from hub_event_framework.common.config import (
    DEFAULT_DISPATCH_CONFIG,
    _resolve_dict,
    _resolve_env_vars,
    get_dispatch_config,
    get_hub_config,
    get_logging_config,
    load_config,
    to_bool,
)

# 测试用的配置文件内容
TEST_CONFIG = """
dispatch:
  isolate_handler_errors: "${TEST_HUB_ISOLATE:-false}"
  strict_conversion: "false"

hubs:
  chatHub:
    strict_conversion: true

logging:
  level: "${TEST_LOG_LEVEL:-DEBUG}"
  use_json: "true"
"""


@pytest.fixture
def config_file():
    """创建临时配置文件并通过 CONFIG_PATH 指向它"""
    temp_dir = tempfile.mkdtemp()
    config_path = os.path.join(temp_dir, "config.yml")
    with open(config_path, "w", encoding="utf-8") as f:
        f.write(TEST_CONFIG)

    original_config_path = os.environ.get("CONFIG_PATH")
    os.environ["CONFIG_PATH"] = config_path

    yield config_path

    if original_config_path is not None:
        os.environ["CONFIG_PATH"] = original_config_path
    else:
        os.environ.pop("CONFIG_PATH", None)
    shutil.rmtree(temp_dir)


@pytest.fixture
def no_config_file(tmp_path, monkeypatch):
    """没有任何配置文件的环境"""
    monkeypatch.setenv("CONFIG_PATH", str(tmp_path / "absent.yml"))
    monkeypatch.chdir(tmp_path)


class TestConfigUnit:
    """配置文件加载单元测试"""

    def test_load_config(self, config_file):
        config = load_config()

        assert "dispatch" in config
        assert "hubs" in config
        assert "logging" in config

    def test_env_defaults_and_type_coercion(self, config_file):
        config = load_config()

        assert config["dispatch"]["isolate_handler_errors"] is False
        assert config["dispatch"]["strict_conversion"] is False
        assert config["logging"]["level"] == "DEBUG"
        assert config["logging"]["use_json"] is True

    def test_env_override(self, config_file, monkeypatch):
        monkeypatch.setenv("TEST_HUB_ISOLATE", "true")

        assert get_dispatch_config()["isolate_handler_errors"] is True

    def test_get_hub_config_overrides_dispatch(self, config_file):
        hub_config = get_hub_config("chatHub")

        assert hub_config["strict_conversion"] is True
        assert hub_config["isolate_handler_errors"] is False

    def test_get_hub_config_unknown_hub(self, config_file):
        hub_config = get_hub_config("otherHub")

        assert hub_config["strict_conversion"] is False

    def test_get_logging_config(self, config_file):
        assert get_logging_config()["level"] == "DEBUG"

    def test_missing_file_returns_defaults(self, no_config_file):
        assert load_config() == {}
        assert get_dispatch_config() == DEFAULT_DISPATCH_CONFIG
        assert get_logging_config() == {}

    def test_invalid_yaml_returns_empty(self, tmp_path, monkeypatch):
        bad_file = tmp_path / "bad.yml"
        bad_file.write_text("dispatch: [unclosed", encoding="utf-8")
        monkeypatch.setenv("CONFIG_PATH", str(bad_file))

        assert load_config() == {}


class TestEnvResolution:
    """环境变量解析测试"""

    def test_resolve_env_var_set(self, monkeypatch):
        monkeypatch.setenv("TEST_VAR", "value")
        assert _resolve_env_vars("${TEST_VAR:-default}") == "value"

    def test_resolve_env_var_default(self, monkeypatch):
        monkeypatch.delenv("TEST_VAR_UNSET", raising=False)
        assert _resolve_env_vars("${TEST_VAR_UNSET:-default}") == "default"
        assert _resolve_env_vars("${TEST_VAR_UNSET:other}") == "other"

    def test_resolve_non_string(self):
        assert _resolve_env_vars(5) == 5

    def test_resolve_dict_nested(self, monkeypatch):
        monkeypatch.setenv("TEST_PORT", "6379")
        data = {"outer": {"port": "${TEST_PORT}", "flag": "TRUE", "name": "hub"}, "count": 3}

        assert _resolve_dict(data) == {"outer": {"port": 6379, "flag": True, "name": "hub"}, "count": 3}


class TestToBool:
    """布尔配置值转换测试"""

    @pytest.mark.parametrize("value, expected", [
        (True, True),
        (False, False),
        (1, True),
        (0, False),
        ("yes", True),
        ("On", True),
        ("no", False),
        ("OFF", False),
        ("0", False),
        (" true ", True),
    ])
    def test_recognized_values(self, value, expected):
        assert to_bool(value) is expected

    def test_none_returns_default(self):
        assert to_bool(None, True) is True
        assert to_bool(None, False) is False

    def test_unrecognized_value_returns_default(self):
        assert to_bool("maybe", True) is True
        assert to_bool("maybe", False) is False

    def test_env_value_no_disables_isolation(self, config_file, monkeypatch):
        monkeypatch.setenv("TEST_HUB_ISOLATE", "no")

        assert to_bool(get_dispatch_config()["isolate_handler_errors"], True) is False
