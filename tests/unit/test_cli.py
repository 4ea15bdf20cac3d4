import io

import pytest

from mathprep import cli
from mathprep.utils.config import Config
from mathprep.utils.logger import get_logger


def test_file_written_to_output_dir(tmp_path):
    src = tmp_path / "answer.md"
    src.write_text(r"\[ x^2 \]", encoding="utf-8")
    out_dir = tmp_path / "out"

    assert cli.main([str(src), "--output-dir", str(out_dir)]) == 0
    assert (out_dir / "answer.md").read_text(encoding="utf-8") == "$$ x^2 $$"


def test_in_place(tmp_path):
    src = tmp_path / "answer.md"
    src.write_text("答案是$x=1$对吗", encoding="utf-8")

    assert cli.main([str(src), "--in-place"]) == 0
    assert src.read_text(encoding="utf-8") == "答案是 $x=1$ 对吗"


def test_missing_file_reports_failure(tmp_path):
    assert cli.main([str(tmp_path / "missing.md"), "--output-dir", str(tmp_path)]) == 1


def test_stats_summary(tmp_path, capsys):
    src = tmp_path / "a.md"
    src.write_text("x^2", encoding="utf-8")

    assert cli.main([str(src), "--output-dir", str(tmp_path / "out"), "--stats"]) == 0
    assert "NORMALIZATION SUMMARY" in capsys.readouterr().out


def test_stdin_to_stdout(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("答案是$x=1$对吗"))
    assert cli.main([]) == 0
    assert capsys.readouterr().out == "答案是 $x=1$ 对吗\n"


def test_trace_prints_stages(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(r"\[ x^2 \]"))
    assert cli.main(["--trace"]) == 0
    out = capsys.readouterr().out
    assert "escapes" in out
    assert "cjk_spacing" in out


def test_default_output_path_uses_suffix(tmp_path):
    config = Config()
    config.output_suffix = ".fixed"
    path = tmp_path / "answer.md"
    assert cli.resolve_output_path(path, config, None, False) == tmp_path / "answer.fixed.md"
    assert cli.resolve_output_path(path, config, None, True) == path


def test_config_validation(monkeypatch):
    monkeypatch.setenv("MATHPREP_LOG_LEVEL", "loud")
    monkeypatch.setenv("MATHPREP_ENCODING", "no-such-codec")
    errors = Config().validate()
    assert len(errors) == 2


def test_config_defaults_are_valid(monkeypatch):
    for name in ("MATHPREP_LOG_LEVEL", "MATHPREP_LOG_DIR", "MATHPREP_ENCODING", "MATHPREP_OUTPUT_SUFFIX"):
        monkeypatch.delenv(name, raising=False)
    config = Config()
    assert config.validate() == []
    assert config.get_log_path() is None


def test_child_logger_name():
    assert get_logger("cli").name == "mathprep.cli"


def test_trace_with_paths_rejected(tmp_path, capsys):
    src = tmp_path / "a.md"
    src.write_text("x^2", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(src), "--trace"])
    assert exc_info.value.code == 2
    assert "--trace" in capsys.readouterr().err
