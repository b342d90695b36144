import json
import os
from pathlib import Path

import pytest

from scholarpage.cli.main import main

BIB = "@article{a1, title = {Foo}, year = {2020}}\n@article{a2, title = {Baz}, year = {2021}}\n"


def test_publications_command_prints_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "publications.bib").write_text(BIB, encoding="utf-8")

    code = main(["--project-root", str(tmp_path), "publications", "--json"])

    assert code == 0
    records = json.loads(capsys.readouterr().out)
    assert [r["id"] for r in records] == ["a2", "a1"]


def test_publications_command_prints_table(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "publications.bib").write_text(BIB, encoding="utf-8")

    code = main(["--project-root", str(tmp_path), "publications"])

    assert code == 0
    out = capsys.readouterr().out
    assert "Baz" in out
    assert "Entries seen: 2" in out


def test_build_command_writes_index(tmp_path: Path) -> None:
    (tmp_path / "publications.bib").write_text(BIB, encoding="utf-8")
    out_dir = tmp_path / "public"

    code = main(["--project-root", str(tmp_path), "build", "--out", str(out_dir)])

    assert code == 0
    page = (out_dir / "index.html").read_text(encoding="utf-8")
    assert page.index("Baz") < page.index("Foo")


def test_missing_bibliography_exits_with_error(tmp_path: Path) -> None:
    code = main(["--project-root", str(tmp_path), "publications"])

    assert code == 1


def test_publications_command_rejects_non_positive_limit(tmp_path: Path) -> None:
    (tmp_path / "publications.bib").write_text(BIB, encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["--project-root", str(tmp_path), "publications", "--limit", "-1"])

    assert excinfo.value.code == 2


def test_web_command_runs_app_factory_with_reload(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import uvicorn

    for name in ("SCHOLARPAGE_ROOT", "SCHOLARPAGE_BIB", "SCHOLARPAGE_PROFILE", "SCHOLARPAGE_OUT"):
        monkeypatch.setenv(name, "")
    calls: list[tuple[tuple, dict]] = []
    monkeypatch.setattr(uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

    code = main(["--project-root", str(tmp_path), "web", "--port", "9001", "--reload"])

    assert code == 0
    [(args, kwargs)] = calls
    assert args == ("scholarpage.web.app:create_default_app",)
    assert kwargs["factory"] is True
    assert kwargs["reload"] is True
    assert kwargs["port"] == 9001
    assert os.environ["SCHOLARPAGE_ROOT"] == str(tmp_path.resolve())
    assert os.environ["SCHOLARPAGE_BIB"] == str(tmp_path.resolve() / "publications.bib")
