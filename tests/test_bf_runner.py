import io

import pytest

from bftape.bf_runner import run_file, run_source
from bftape.config import InputMode, InterpreterConfig
from bftape.errors import ConfigurationError


def test_run_source_separate_input():
    assert run_source(",+.", "a") == b"b"


def test_run_source_combined_mode():
    config = InterpreterConfig(input_mode=InputMode.COMBINED)
    assert run_source(",.!q", config=config) == b"q"


def test_configuration_error_before_any_output():
    sink = io.BytesIO()
    config = InterpreterConfig(input_mode=InputMode.COMBINED)
    with pytest.raises(ConfigurationError):
        run_source("+.!a!b", config=config, output=sink)
    assert sink.getvalue() == b""


def test_run_file(tmp_path):
    path = tmp_path / "echo.bf"
    path.write_text("  ,.  \n")
    assert run_file(str(path), "x") == b"x"


def test_run_file_missing(tmp_path):
    with pytest.raises(OSError):
        run_file(str(tmp_path / "missing.bf"), "")
