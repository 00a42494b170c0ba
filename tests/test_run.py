"""CLI wrapper."""

import json
import os
import subprocess
import sys

import pytest

from luopan.records import load_records
from luopan.run import main, run

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def test_json_output(capsys):
    main(["--year", "2024", "--heading", "0"])
    data = json.loads(capsys.readouterr().out)
    assert data["mountain"]["facing"] == "子"
    assert data["center_star"] == 3


def test_text_output(capsys):
    main(["--year", "2024", "--heading", "180", "--format", "text"])
    out = capsys.readouterr().out
    assert "坐子向午" in out


def test_date_uses_li_chun(capsys):
    main(["--date", "2024-02-01"])
    data = json.loads(capsys.readouterr().out)
    assert data["year"] == 2023


def test_run_returns_context(capsys):
    context = run(["--year", "2025", "--heading", "90"])
    assert context["year"] == 2025
    assert context["mountain"]["facing"] == "卯"


def test_main_returns_none(capsys):
    assert main(["--year", "2024", "--heading", "0"]) is None


def test_console_entry_point_exits_zero():
    # same call the generated luopan script makes
    result = subprocess.run(
        [sys.executable, "-c", "import sys; from luopan.run import main; sys.exit(main())",
         "--year", "2024", "--heading", "0"],
        cwd=PROJECT_ROOT, capture_output=True, text=True, encoding="utf-8",
        env={**os.environ, "PYTHONIOENCODING": "utf-8"},
    )
    assert result.returncode == 0, result.stderr
    assert json.loads(result.stdout)["mountain"]["facing"] == "子"


def test_save(tmp_path, capsys):
    path = tmp_path / "records.json"
    for heading in ("0", "90", "180", "270"):
        main(["--year", "2024", "--heading", heading, "--save", "--records", str(path)])
    records = load_records(path)
    assert [r.name for r in records] == ["酉", "午", "卯"]


def test_bad_records_file_is_usage_error(tmp_path, capsys):
    path = tmp_path / "records.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--year", "2024", "--save", "--records", str(path)])
    assert exc.value.code == 2


def test_year_and_date_exclusive(capsys):
    with pytest.raises(SystemExit):
        main(["--year", "2024", "--date", "2024-01-01"])
