import json
import logging

import pytest

from putflow import __version__
from putflow.cli import build_parser, main
from putflow.logs import get_log_level, set_log_level


@pytest.fixture(autouse=True)
def restore_logging():
    old = get_log_level()
    yield
    logging.captureWarnings(False)
    set_log_level(old)


@pytest.fixture
def project(write, tmp_path):
    write("a.py", '# put id:"a", label:"Load", node_type:"input", output:"mid.csv"\n')
    write("b.R", '# put id:"b", label:"Report", input:"mid.csv"\nwrite.csv(df, "final.csv")\n')
    return tmp_path


def test_scan_table(project, capsys):
    assert main(["scan", str(project)]) == 0
    assert capsys.readouterr().out.startswith("putflow workflow: 2 node(s) in 2 file(s)")


def test_scan_json(project, capsys):
    assert main(["scan", str(project), "--format", "json", "--line-numbers"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert [r["id"] for r in rows] == ["a", "b"]
    assert rows[0]["line_number"] == 1


def test_auto_and_merge(project, capsys):
    assert main(["auto", str(project), "--format", "json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert {r["file_name"]: r["output"] for r in rows}["b.R"] == "final.csv"
    assert main(["merge", str(project), "--strategy", "union", "--format", "json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert {r["id"]: r["output"] for r in rows}["b"] == "b.R,final.csv"


def test_generate(project, capsys):
    assert main(["generate", str(project / "b.R"), "--style", "single"]) == 0
    assert '#put id:"b", label:"b"' in capsys.readouterr().out


def test_diagram_raw(project, capsys):
    assert main(["diagram", str(project), "--output", "raw", "--direction", "LR", "--theme", "github"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("flowchart LR")
    assert "a --> b" in out


def test_diagram_to_file(project, tmp_path, capsys):
    target = tmp_path / "flow.md"
    assert main(["diagram", str(project), "--output", "file", "--file", str(target),
                 "--title", "Pipeline", "--show-artifacts", "--clicks", "file"]) == 0
    text = target.read_text()
    assert text.startswith("# Pipeline")
    assert "click a \"file://" in text
    assert "Diagram saved to:" in capsys.readouterr().out


def test_diagram_without_nodes(tmp_path, capsys):
    (tmp_path / "empty.py").write_text("x = 1\n")
    assert main(["diagram", str(tmp_path)]) == 1
    assert "[WARN]" in capsys.readouterr().err


def test_errors_exit_with_one(capsys):
    assert main(["scan", "no/such/dir"]) == 1
    assert "[ERROR] Path does not exist" in capsys.readouterr().err


def test_ask_runs_text_request(project, capsys):
    assert main(["ask", "scan", f"'{project}'"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Found 2 workflow node(s):")
    assert "Node 2: b" in out


def test_ask_diagram_and_json(project, capsys):
    assert main(["ask", f"diagram '{project}' direction=LR"]) == 0
    assert capsys.readouterr().out.startswith("flowchart LR")
    assert main(["ask", "--json", "--session", "s1", "help"]) == 0
    rec = json.loads(capsys.readouterr().out)
    assert rec["session_id"] == "s1"
    assert rec["status"] == "completed"
    assert rec["output"][0]["role"] == "assistant"


def test_ask_error_exit_code(capsys):
    assert main(["ask", "scan './does/not/exist'"]) == 1
    assert capsys.readouterr().out.startswith("Error: Path does not exist")


def test_log_level_flag(project):
    main(["--log-level", "DEBUG", "scan", str(project)])
    assert get_log_level() == "DEBUG"


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--version"])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_parser_rejects_bad_input():
    parser = build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args([])
    with pytest.raises(SystemExit):
        parser.parse_args(["diagram", ".", "--theme", "neon"])
    args = parser.parse_args(["auto", "src"])
    assert args.recursive is False
    assert parser.parse_args(["scan"]).recursive is True
