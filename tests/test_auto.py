import pyperclip
import pytest

from putflow import PutflowWarning, put, put_auto, put_generate, put_merge
from putflow.auto import (extract_quoted_strings, format_suggestion, infer_node_type,
                          is_likely_file_path, merge_annotations)
from putflow.workflow import ANNOTATION_COLUMNS

ETL = '''
    import pandas as pd
    df = pd.read_csv("raw/data.csv")
    df.to_csv("clean.csv")
    '''


@pytest.fixture
def scripts(write):
    write("etl.py", ETL)
    write("01-load.R", 'x <- read.csv("source.csv")\n')
    write("config.yaml", "key: value\n")
    return write


# ---------- heurísticas ----------
@pytest.mark.parametrize("value, expected", [
    ("data.csv", True), ("out/results", True), ("C:\\data\\x", True), ("Dockerfile", True),
    ("ab", False), ("hello", False), ("TRUE", False), ("NaN", False),
    ("https://example.com/a.csv", False), ("", False), (None, False),
])
def test_is_likely_file_path(value, expected):
    assert is_likely_file_path(value) is expected


def test_extract_quoted_strings():
    assert extract_quoted_strings('f("a.csv", \'b.txt\')') == ["a.csv", "b.txt"]
    assert extract_quoted_strings("no strings") == []


def test_infer_node_type():
    assert infer_node_type([], ["out.csv"]) == "input"
    assert infer_node_type(["in.csv"], []) == "output"
    assert infer_node_type(["in.csv"], ["out.csv"]) == "process"
    assert infer_node_type([], []) == "process"


# ---------- put_auto ----------
def test_put_auto_detects_io(scripts, tmp_path):
    wf = put_auto(str(tmp_path))
    rows = {r["file_name"]: r for r in wf}
    assert set(rows) == {"etl.py", "01-load.R"}
    etl = rows["etl.py"]
    assert etl["id"] == "etl" and etl["label"] == "etl"
    assert etl["input"] == "raw/data.csv"
    assert etl["output"] == "clean.csv"
    assert etl["node_type"] == "process"
    assert etl["auto_detected"] is True
    load = rows["01-load.R"]
    assert load["id"] == "01_load"
    assert load["output"] == "01-load.R"
    assert wf.columns == list(ANNOTATION_COLUMNS) + ["auto_detected"]


def test_put_auto_category_switches(scripts, tmp_path):
    wf = put_auto(str(tmp_path / "etl.py"), detect_inputs=False)
    assert wf[0]["input"] is None
    assert wf[0]["node_type"] == "input"
    wf = put_auto(str(tmp_path / "etl.py"), detect_outputs=False)
    assert wf[0]["output"] == "etl.py"


def test_put_auto_line_numbers_column(scripts, tmp_path):
    wf = put_auto(str(tmp_path), include_line_numbers=True)
    assert wf.columns[-2:] == ["line_number", "auto_detected"]
    assert set(wf.column("line_number")) == {1}


def test_put_auto_unsupported_language_gives_minimal_row(scripts, tmp_path):
    wf = put_auto(str(tmp_path), pattern=r"\.yaml$")
    row = wf[0]
    assert row["id"] == "config"
    assert row["input"] is None and row["output"] == "config.yaml"
    assert row["node_type"] == "process"


def test_put_auto_build_files(write, tmp_path):
    write("Dockerfile", 'FROM python:3.12\nCOPY ["app.py", "/srv/app.py"]\n')
    wf = put_auto(str(tmp_path))
    assert wf[0]["id"] == "dockerfile"
    assert wf[0]["label"] == "Dockerfile"
    assert "app.py" in wf[0]["input"]


def test_put_auto_no_files_warns(tmp_path):
    with pytest.warns(PutflowWarning, match="No files matching"):
        wf = put_auto(str(tmp_path))
    assert wf.empty and "auto_detected" in wf.columns


def test_put_auto_exclude_and_recursion(write, tmp_path):
    write("a.py", ETL); write("sub/b.py", ETL); write("skip/c.py", ETL)
    assert put_auto(str(tmp_path)).column("id") == ["a"]
    wf = put_auto(str(tmp_path), recursive=True, exclude="skip/")
    assert sorted(wf.column("id")) == ["a", "b"]


# ---------- put_generate ----------
def test_format_suggestion_styles():
    row = {"id": "etl", "label": "etl", "node_type": "process", "input": "a.csv",
           "output": "etl.py", "file_name": "etl.py"}
    assert format_suggestion(row, "//", "single") == '//put id:"etl", label:"etl", node_type:"process", input:"a.csv"'
    text = format_suggestion(row, "#", "multiline")
    assert text.splitlines() == [
        "# Suggested annotations for: etl.py",
        '#put id:"etl", label:"etl", \\',
        '#    node_type:"process", \\',
        '#    input:"a.csv"',
    ]


def test_put_generate_console(scripts, tmp_path, capsys):
    out = put_generate(str(tmp_path / "etl.py"), style="single")
    assert out == ['#put id:"etl", label:"etl", node_type:"process", input:"raw/data.csv", output:"clean.csv"']
    assert out[0] in capsys.readouterr().out


def test_put_generate_raw_is_silent(scripts, tmp_path, capsys):
    out = put_generate(str(tmp_path), output="raw")
    assert len(out) == 2
    assert capsys.readouterr().out == ""


def test_put_generate_uses_language_prefix(write, tmp_path):
    write("query.sql", "SELECT * FROM orders;\n")
    out = put_generate(str(tmp_path), output="raw", style="single")
    assert out[0].startswith('--put id:"query"')


def test_put_generate_file_output(scripts, tmp_path):
    put_generate(str(tmp_path / "etl.py"), output="file")
    text = (tmp_path / "etl.py.put").read_text()
    assert text.startswith("# Suggested annotations for: etl.py")


def test_put_generate_clipboard_fallback(scripts, tmp_path, monkeypatch, capsys):
    def broken(_):
        raise pyperclip.PyperclipException("no backend")
    monkeypatch.setattr(pyperclip, "copy", broken)
    with pytest.warns(PutflowWarning, match="Clipboard not available"):
        put_generate(str(tmp_path / "etl.py"), output="clipboard")
    assert "Suggested annotations" in capsys.readouterr().out


def test_put_generate_insert_round_trip(scripts, tmp_path):
    f = tmp_path / "etl.py"
    put_generate(str(f), output="raw", insert=True)
    assert f.read_text().splitlines()[0] == ""
    wf = put(str(f))
    assert wf[0]["id"] == "etl"
    assert wf[0]["input"] == "raw/data.csv"
    before = f.read_text()
    put_generate(str(f), output="raw", insert=True)
    assert f.read_text() == before


def test_put_generate_keeps_shebang_first(write, tmp_path):
    f = write("run.sh", '#!/bin/bash\ncat "input.txt" > "out.txt"\n')
    put_generate(str(f), output="raw", insert=True, style="single")
    lines = f.read_text().splitlines()
    assert lines[0] == "#!/bin/bash"
    assert lines[2].startswith('#put id:"run"')


def test_put_generate_invalid_arguments(scripts, tmp_path):
    with pytest.raises(ValueError, match="Invalid output"):
        put_generate(str(tmp_path), output="printer")
    with pytest.raises(ValueError, match="Invalid style"):
        put_generate(str(tmp_path), style="fancy")


# ---------- put_merge ----------
@pytest.fixture
def mixed(write):
    write("etl.py", '# put id:"etl_manual", label:"ETL"\n' + ETL.replace("\n    ", "\n").strip() + "\n")
    write("other.py", 'import pandas as pd\npd.read_csv("x.csv")\n')
    write("full.py", '# put id:"full", label:"Full", node_type:"process", input:"a.csv", output:"b.csv"\n'
                     'df.to_csv("c.csv")\n')
    return write


def _by_file(wf):
    return {r["file_name"]: r for r in wf}


def test_put_merge_manual_priority(mixed, tmp_path):
    rows = _by_file(put_merge(str(tmp_path)))
    etl = rows["etl.py"]
    assert etl["id"] == "etl_manual" and etl["label"] == "ETL"
    assert etl["node_type"] == "process"
    assert etl["input"] == "raw/data.csv"
    assert etl["output"] == "etl.py"
    assert etl["auto_detected"] is True
    assert rows["other.py"]["id"] == "other" and rows["other.py"]["auto_detected"] is True
    full = rows["full.py"]
    assert (full["input"], full["output"], full["auto_detected"]) == ("a.csv", "b.csv", False)


def test_put_merge_supplement_replaces_default_output(mixed, tmp_path):
    rows = _by_file(put_merge(str(tmp_path), merge_strategy="supplement"))
    assert rows["etl.py"]["output"] == "clean.csv"
    assert rows["full.py"]["output"] == "b.csv"


def test_put_merge_union(mixed, tmp_path):
    rows = _by_file(put_merge(str(tmp_path), merge_strategy="union"))
    assert rows["full.py"]["output"] == "b.csv,c.csv"
    assert rows["full.py"]["input"] == "a.csv"
    assert rows["full.py"]["auto_detected"] is True
    assert rows["etl.py"]["input"] == "raw/data.csv"


def test_put_merge_columns_and_errors(mixed, tmp_path):
    wf = put_merge(str(tmp_path), include_line_numbers=True)
    assert wf.columns == list(ANNOTATION_COLUMNS) + ["line_number", "auto_detected"]
    with pytest.raises(ValueError, match="Invalid merge_strategy"):
        put_merge(str(tmp_path), merge_strategy="both")


def test_merge_annotations_edge_cases():
    auto = [{"file_path": "a.py", "file_name": "a.py", "id": "a", "auto_detected": True}]
    manual = [{"file_path": "m.py", "file_name": "m.py", "id": "m"}]
    assert merge_annotations([], auto, "union") == auto
    assert merge_annotations(manual, [], "union") == [dict(manual[0], auto_detected=False)]


def test_merge_strategies_differ(write, tmp_path):
    write("step.py", '# put id:"step", input:"manual.csv"\nimport pandas as pd\npd.read_csv("auto.csv")\n')
    assert put_merge(str(tmp_path))[0]["input"] == "manual.csv"
    union = put_merge(str(tmp_path), merge_strategy="union")[0]["input"]
    assert set(union.split(",")) == {"manual.csv", "auto.csv"}
