from __future__ import annotations

import json
from pathlib import Path
import subprocess
import sys

import pytest

from linux_errno import __version__
from linux_errno.arch import mips, powerpc
from linux_errno.main import main, parse_args


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)


def test_parse_args_defaults() -> None:
    args = parse_args([])
    assert args.queries == []
    assert args.arch is None
    assert args.list is False
    assert args.output == "text"
    assert args.log_level == "WARNING"
    assert args.structured_logs is False


def test_lookup_by_number_and_name(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--arch", "alpha", "11", "EWOULDBLOCK"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "EDEADLK 11 Resource deadlock would occur",
        "EWOULDBLOCK 35 Operation would block (alias of EAGAIN)",
    ]


def test_names_are_case_insensitive(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--arch", "x86_64", "eagain"]) == 0
    assert capsys.readouterr().out.strip() == "EAGAIN 11 Try again"


def test_unknown_query_sets_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--arch", "x86", "ENOPE", "0", "4096", "\N{SUPERSCRIPT TWO}", "2"]) == 2
    captured = capsys.readouterr()
    assert captured.out.strip() == "ENOENT 2 No such file or directory"
    assert "Unknown error number or name: ENOPE" in captured.err
    assert "Unknown error number or name: \N{SUPERSCRIPT TWO}" in captured.err


def test_unsupported_arch_exits_with_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--arch", "vax", "EIO"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("linux-errno: Unsupported architecture 'vax'")


def test_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--arch", "mips", "--output", "json", "EDQUOT"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == [
        {
            "arch": "mips",
            "name": "EDQUOT",
            "code": 1133,
            "description": "Quota exceeded",
            "alias_of": None,
        }
    ]


def test_list_prints_every_name(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--arch", "ppc64le", "--list"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(powerpc)
    assert "EDEADLOCK 58 File locking deadlock error" in lines


def test_structured_logs_carry_the_architecture(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--arch", "mips", "--structured-logs", "EMISSING"]) == 2
    records = [json.loads(line) for line in capsys.readouterr().err.splitlines()]
    assert records[-1]["level"] == "WARNING"
    assert records[-1]["context"] == {"arch": "mips"}
    assert "EMISSING" not in mips


def test_dotenv_selects_default_arch(tmp_path: Path, subprocess_env: dict[str, str]) -> None:
    (tmp_path / ".env").write_text("LINUX_ERRNO_TARGET_ARCH=sparc64\n", encoding="utf-8")
    result = subprocess.run(
        [sys.executable, "-m", "linux_errno", "EDEADLOCK"],
        capture_output=True,
        text=True,
        env=subprocess_env,
        cwd=tmp_path,
    )
    assert result.returncode == 0
    assert result.stdout.strip() == "EDEADLOCK 108 File locking deadlock error"


def test_arch_flag_beats_environment(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("LINUX_ERRNO_TARGET_ARCH", "alpha")
    assert main(["--arch", "x86", "EAGAIN"]) == 0
    assert capsys.readouterr().out.strip() == "EAGAIN 11 Try again"
    assert main(["EAGAIN"]) == 0
    assert capsys.readouterr().out.strip() == "EAGAIN 35 Try again"


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == __version__


def test_log_level_is_case_insensitive(capsys: pytest.CaptureFixture[str]) -> None:
    assert parse_args(["--log-level", "debug"]).log_level == "DEBUG"
    assert main(["--arch", "x86", "--log-level", "info", "EIO"]) == 0
    assert capsys.readouterr().out.strip() == "EIO 5 I/O error"


def test_unknown_log_level_is_a_usage_error(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--log-level", "bogus", "EIO"])
    assert excinfo.value.code == 2
    assert "invalid choice: 'BOGUS'" in capsys.readouterr().err


def test_arch_help_mentions_import_time_override(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        parse_args(["--help"])
    assert "LINUX_ERRNO_TARGET_ARCH" in capsys.readouterr().out


def test_unsupported_override_fails_before_arch_flag(subprocess_env: dict[str, str]) -> None:
    subprocess_env["LINUX_ERRNO_TARGET_ARCH"] = "vax"
    result = subprocess.run(
        [sys.executable, "-m", "linux_errno", "--arch", "x86", "EIO"],
        capture_output=True,
        text=True,
        env=subprocess_env,
    )
    assert result.returncode != 0
    assert result.stdout == ""
    assert "UnsupportedArchitectureError" in result.stderr
