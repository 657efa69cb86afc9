import uuid

import pytest

from putflow import PutflowWarning, put
from putflow.workflow import ANNOTATION_COLUMNS


@pytest.fixture
def project(write):
    write("01_load.R", '''
        # put id:"load", label:"Load Data", node_type:"input", output:"raw.csv"
        data <- read.csv("source.csv")
        ''')
    write("02_clean.py", '''
        # put id:"clean", label:"Clean", input:"raw.csv", output:"clean.csv"
        import pandas as pd
        ''')
    write("sql/03_report.sql", '''
        -- put id:"report", label:"Report", input:"clean.csv", node_type:"output"
        SELECT 1;
        ''')
    write("notes.txt", '# put id:"ignored"\n')
    return write


def test_put_scans_directory(project, tmp_path):
    wf = put(str(tmp_path))
    assert sorted(wf.column("id")) == ["clean", "load", "report"]
    assert wf.columns[:len(ANNOTATION_COLUMNS)] == list(ANNOTATION_COLUMNS)
    row = {r["id"]: r for r in wf}["report"]
    assert row["file_name"] == "03_report.sql"
    assert row["file_type"] == "sql"
    assert row["file_path"].endswith("03_report.sql")


def test_put_non_recursive(project, tmp_path):
    wf = put(str(tmp_path), recursive=False)
    assert sorted(wf.column("id")) == ["clean", "load"]


def test_put_custom_pattern(project, tmp_path):
    wf = put(str(tmp_path), pattern=r"\.py$")
    assert wf.column("id") == ["clean"]


def test_put_single_file_and_line_numbers(project, tmp_path):
    wf = put(tmp_path / "02_clean.py", include_line_numbers=True)
    assert len(wf) == 1
    assert wf[0]["line_number"] == 1
    assert "line_number" in wf.columns


def test_put_default_output_and_generated_id(write, tmp_path):
    write("step.py", '# put label:"No id"\n')
    with pytest.warns(PutflowWarning, match="Missing 'id'"):
        wf = put(str(tmp_path))
    row = wf[0]
    assert row["output"] == "step.py"
    assert uuid.UUID(row["id"]).version == 4


def test_put_empty_output_defaults_to_file_name(write, tmp_path):
    write("step.py", '# put id:"a", output:""\n')
    assert put(str(tmp_path))[0]["output"] == "step.py"


def test_put_annotation_cannot_override_provenance(write, tmp_path):
    write("real.py", '# put id:"a", file_name:"fake.py"\n')
    assert put(str(tmp_path))[0]["file_name"] == "real.py"


def test_put_extra_properties_become_columns(write, tmp_path):
    write("a.py", '# put id:"a", owner:"ana", stage:"2"\n')
    wf = put(str(tmp_path))
    assert wf.columns[-2:] == ["owner", "stage"]
    assert wf[0]["owner"] == "ana"


def test_put_multiline_and_block_annotations(write, tmp_path):
    write("etl.py", '''
        # put id:"etl", \\
        #     label:"ETL", \\
        #     output:"out.csv"
        ''')
    write("app.js", '''
        /**
         * put id:"app", label:"App"
         */
        const x = 1;
        ''')
    wf = put(str(tmp_path), include_line_numbers=True)
    rows = {r["id"]: r for r in wf}
    assert rows["etl"]["label"] == "ETL"
    assert rows["etl"]["output"] == "out.csv"
    assert rows["app"]["line_number"] == 2


def test_put_comment_prefixes_by_language(write, tmp_path):
    write("model.m", '% put id:"matlab"\n')
    write("script.lua", '-- put id:"lua"\n')
    write("main.go", '// put id:"go"\n')
    write("run.sh", '# put id:"shell"\n')
    assert sorted(put(str(tmp_path)).column("id")) == ["go", "lua", "matlab", "shell"]


def test_put_wrong_prefix_is_not_an_annotation(write, tmp_path):
    write("main.go", '# put id:"hash"\n// put id:"slash"\n')
    assert put(str(tmp_path)).column("id") == ["slash"]


def test_put_no_files_warns_and_returns_empty(tmp_path):
    (tmp_path / "readme.txt").write_text("nothing")
    with pytest.warns(PutflowWarning, match="No files matching pattern"):
        wf = put(str(tmp_path))
    assert wf.empty
    assert wf.columns == list(ANNOTATION_COLUMNS)


def test_put_validation_warning_is_aggregated(write, tmp_path):
    write("a.py", '# put id:"a", node_type:"weird", input:"datafile"\n')
    with pytest.warns(PutflowWarning, match="Validation issues found") as rec:
        put(str(tmp_path))
    msg = str(rec[0].message)
    assert "a.py line 1" in msg
    assert "Unusual node_type" in msg
    assert "missing extension" in msg


def test_put_validate_false_is_silent(write, tmp_path, recwarn):
    write("a.py", '# put id:"a", node_type:"weird"\n# put id:"b"\n')
    put(str(tmp_path), validate=False)
    assert not [w for w in recwarn if issubclass(w.category, PutflowWarning)]


def test_put_duplicate_ids_warn(write, tmp_path):
    write("a.py", '# put id:"same"\n')
    write("b.py", '# put id:"same"\n')
    with pytest.warns(PutflowWarning, match="Duplicate node IDs found: same"):
        put(str(tmp_path))


def test_put_duplicate_ids_warn_without_validation(write, tmp_path):
    write("a.py", '# put id:"a", node_type:"weird"\n# put id:"a"\n')
    with pytest.warns(PutflowWarning, match="Duplicate node IDs found: a") as rec:
        wf = put(str(tmp_path), validate=False)
    assert len(wf) == 2
    assert not [w for w in rec if "Validation issues" in str(w.message)]


def test_put_exclude(project, tmp_path):
    wf = put(str(tmp_path), exclude=["sql/", r"clean"])
    assert wf.column("id") == ["load"]


def test_put_exclude_applies_to_single_file(project, tmp_path):
    with pytest.warns(PutflowWarning, match="No files matching"):
        wf = put(str(tmp_path / "02_clean.py"), exclude="clean")
    assert wf.empty


def test_put_ignores_vendor_directories(write, tmp_path):
    write("node_modules/lib/index.js", '// put id:"vendor"\n')
    write("src/app.js", '// put id:"app"\n')
    assert put(str(tmp_path)).column("id") == ["app"]


@pytest.mark.parametrize("bad, exc", [
    (["a", "b"], TypeError),
    (123, TypeError),
    ("", ValueError),
    ("../outside", ValueError),
])
def test_put_rejects_bad_paths(bad, exc):
    with pytest.raises(exc):
        put(bad)


def test_put_missing_path():
    with pytest.raises(FileNotFoundError, match="Path does not exist"):
        put("definitely/not/here")


def test_put_bad_exclude_type(project, tmp_path):
    with pytest.raises(TypeError, match="'exclude'"):
        put(str(tmp_path), exclude=42)


def test_workflow_table_summary(project, tmp_path):
    wf = put(str(tmp_path))
    s = wf.summary()
    assert s["nodes"] == 3 and s["files"] == 3
    assert s["node_types"]["input"] == 1
    assert str(wf).startswith("putflow workflow: 3 node(s) in 3 file(s)")
    with pytest.raises(KeyError):
        wf.column("nope")


def test_put_is_idempotent(project, tmp_path):
    assert put(str(tmp_path)).to_records() == put(str(tmp_path)).to_records()


def test_basic_pipeline_defaults(write, tmp_path):
    write("foo.R", '#put id:"foo", label:"Foo"\n')
    assert put(str(tmp_path))[0]["output"] == "foo.R"
