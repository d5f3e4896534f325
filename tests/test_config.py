import pytest

from bftape.config import InputMode, InterpreterConfig
from bftape.errors import ConfigurationError


def test_defaults():
    config = InterpreterConfig()
    assert config.tape_length == 30000
    assert config.cell_max == 255
    assert config.input_mode is InputMode.SEPARATE
    assert config.separator == "!"


def test_input_mode_from_string():
    assert InterpreterConfig(input_mode="COMBINED").input_mode is InputMode.COMBINED


@pytest.mark.parametrize("kwargs", [
    {"tape_length": 0},
    {"cell_max": 0},
    {"separator": ""},
    {"separator": "!!"},
    {"input_mode": "interleaved"},
])
def test_invalid_values(kwargs):
    with pytest.raises(ConfigurationError):
        InterpreterConfig(**kwargs)


def test_from_env(monkeypatch):
    monkeypatch.setenv("BF_TAPE_LENGTH", "100")
    monkeypatch.setenv("BF_CELL_MAX", "15")
    monkeypatch.setenv("BF_INPUT_MODE", "combined")
    config = InterpreterConfig.from_env()
    assert config.tape_length == 100
    assert config.cell_max == 15
    assert config.input_mode is InputMode.COMBINED


def test_from_env_overrides_win(monkeypatch):
    monkeypatch.setenv("BF_TAPE_LENGTH", "100")
    config = InterpreterConfig.from_env(tape_length=50, cell_max=None)
    assert config.tape_length == 50
    assert config.cell_max == 255


def test_from_env_reads_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("BF_TAPE_LENGTH=42\n")
    config = InterpreterConfig.from_env()
    assert config.tape_length == 42


def test_from_env_rejects_non_integer(monkeypatch):
    monkeypatch.setenv("BF_CELL_MAX", "lots")
    with pytest.raises(ConfigurationError):
        InterpreterConfig.from_env()
