import pytest
from pydantic import ValidationError as PydanticValidationError

from flagspec.config import DefinitionsConfig, loader

YAML_CONFIG = """\
usage: "serve [<options>] <paths>..."
require_target: "at least one path is required"
options:
  port: "-p,--port:number=3000; Port to use"
  cors: "--cors:boolean; Enable CORS"
"""

TOML_CONFIG = """\
usage = "serve"
require_target = true
handle_help_flag = false

[options]
port = "-p,--port:number=3000; Port to use"
"""


def test_load_yaml(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text(YAML_CONFIG)
    config = loader(path)
    assert config.usage == "serve [<options>] <paths>..."
    assert config.require_target == "at least one path is required"
    assert config.handle_help_flag is True
    assert list(config.options) == ["port", "cors"]


def test_load_yml_from_string_path(tmp_path):
    path = tmp_path / "options.yml"
    path.write_text(YAML_CONFIG)
    assert loader(str(path)).options["cors"] == "--cors:boolean; Enable CORS"


def test_load_toml(tmp_path):
    path = tmp_path / "options.toml"
    path.write_text(TOML_CONFIG)
    config = loader(path)
    assert config.usage == "serve"
    assert config.require_target is True
    assert config.handle_help_flag is False
    assert config.options == {"port": "-p,--port:number=3000; Port to use"}


def test_to_parse_config(tmp_path):
    path = tmp_path / "options.toml"
    path.write_text(TOML_CONFIG)
    parse_config = loader(path).to_parse_config(exit_on_process_error=False)
    assert parse_config.usage == "serve"
    assert parse_config.require_target is True
    assert parse_config.handle_help_flag is False
    assert parse_config.exit_on_process_error is False


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")


def test_unsupported_format(tmp_path):
    path = tmp_path / "options.json"
    path.write_text("{}")
    with pytest.raises(ValueError) as excinfo:
        loader(path)
    assert "Unsupported config format" in str(excinfo.value)


def test_malformed_yaml(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text("options: [unclosed\n")
    with pytest.raises(ValueError) as excinfo:
        loader(path)
    assert "Could not parse" in str(excinfo.value)


def test_content_must_be_a_mapping(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ValueError):
        loader(path)


def test_bad_path_type():
    with pytest.raises(TypeError):
        loader(42)  # type: ignore[arg-type]


def test_empty_spec_is_rejected(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text('options:\n  port: "  "\n')
    with pytest.raises(PydanticValidationError):
        loader(path)


def test_options_must_be_strings():
    with pytest.raises(PydanticValidationError):
        DefinitionsConfig.model_validate({"options": {"port": ["-p"]}})


def test_defaults():
    config = DefinitionsConfig()
    assert config.usage is None
    assert config.require_target is False
    assert config.options == {}
