import pytest

from putflow import PutflowWarning, __version__
from putflow.server import (create_run, detect_operation, execute_request, extract_parameters,
                            extract_text_content, format_result_as_text, get_run, help_text,
                            list_agents, manifest, parse_message, sanitize_path)


def _msg(text):
    return [{"role": "user", "parts": [{"content": text, "content_type": "text/plain"}]}]


@pytest.fixture
def annotated(write, tmp_path):
    write("a.py", '# put id:"a", label:"Load", node_type:"input", output:"mid.csv"\n')
    write("b.py", '# put id:"b", label:"Use", input:"mid.csv"\n')
    return tmp_path


def test_manifest():
    m = manifest()
    assert m["name"] == "putflow"
    assert m["metadata"]["version"] == __version__
    assert "python" in m["metadata"]["supported_languages"]
    assert set(m["metadata"]["operations"]) >= {"scan", "diagram", "auto", "generate", "merge", "help"}
    assert list_agents() == {"agents": [m]}


def test_extract_text_content():
    msgs = _msg("first") + [{"role": "user", "parts": [{"content": "second"}, {"content_type": "x"}]}]
    assert extract_text_content(msgs) == "first second"
    assert extract_text_content([]) == ""
    assert extract_text_content(None) == ""


@pytest.mark.parametrize("text, op", [
    ("Generate a diagram for ./src/", "diagram"),
    ("Please visualize the workflow", "diagram"),
    ("auto-detect inputs in ./scripts", "auto"),
    ("suggest annotations for ./R", "generate"),
    ("merge manual and detected", "merge"),
    ("scan './src' for annotations", "scan"),
    ("help me with themes", "help"),
    ("what can you do?", "skills"),
    ("hello there", "scan"),
])
def test_detect_operation(text, op):
    assert detect_operation(text) == op


def test_extract_parameters():
    p = extract_parameters("Generate a diagram for ./src/ with theme=github direction=lr showing artifacts")
    assert p == {"path": "./src/", "theme": "github", "direction": "LR", "show_artifacts": True}
    p = extract_parameters("Scan 'my project/R' recursively")
    assert p["path"] == "my project/R" and p["recursive"] is True
    assert extract_parameters("help on node types")["topic"] == "node_type"
    assert extract_parameters("nothing here") == {}


def test_parse_message():
    parsed = parse_message(_msg("Scan './src'"))
    assert parsed == {"operation": "scan", "params": {"path": "./src"}, "raw_content": "Scan './src'"}


def test_sanitize_path():
    assert sanitize_path("./src") == "./src"
    assert sanitize_path(None) == "."
    with pytest.warns(PutflowWarning, match="traversal"):
        assert sanitize_path("../etc") == "."
    with pytest.warns(PutflowWarning, match="control characters"):
        assert sanitize_path("src\x00/x") == "."


def test_scan_request(annotated):
    result = execute_request(_msg(f"Scan '{annotated}'"))
    text = format_result_as_text(result)
    assert text.startswith("Found 2 workflow node(s):")
    assert "Node 1: a" in text
    assert "  Label: Load" in text
    assert "  Input: mid.csv" in text


def test_diagram_request(annotated):
    result = execute_request(_msg(f"Create a diagram for '{annotated}' theme=dark direction=LR"))
    assert result.startswith("flowchart LR")
    assert "a --> b" in result
    assert "fill:#1a237e" in result


def test_diagram_request_without_path():
    assert execute_request(_msg("show me a diagram")).startswith("To generate a diagram")


def test_generate_and_auto_requests(write, tmp_path):
    write("etl.py", 'import pandas as pd\ndf = pd.read_csv("in.csv")\n')
    out = execute_request(_msg(f"generate annotations for '{tmp_path}'"))
    assert '#put id:"etl"' in out
    wf = execute_request(_msg(f"auto-detect '{tmp_path}'"))
    assert wf[0]["input"] == "in.csv"


def test_help_requests():
    assert "PUT annotation syntax" in execute_request(_msg("help with annotation syntax"))
    assert "viridis" in help_text("theme")
    assert "python" in help_text("pattern")
    assert help_text().startswith("putflow help topics")
    assert execute_request(_msg("what can you do")).startswith("# putflow skills")


def test_errors_become_text():
    result = execute_request(_msg("scan './does/not/exist'"))
    assert result.startswith("Error: Path does not exist")


def test_format_result_as_text():
    assert format_result_as_text([]) == "No annotations found."
    assert format_result_as_text(["a", "b"]) == "a\nb"
    assert format_result_as_text("plain") == "plain"


def test_runs(annotated):
    run = create_run({"input": _msg(f"scan '{annotated}'"), "session_id": "s-1"})
    assert run["status"] == "completed"
    assert run["session_id"] == "s-1"
    part = run["output"][0]["parts"][0]
    assert part["content_type"] == "text/plain"
    assert "Found 2 workflow node(s)" in part["content"]
    assert get_run(run["run_id"]) is run
    assert get_run("missing") is None
