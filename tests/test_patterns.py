import re

import pytest

from putflow.patterns import (CATEGORIES, DETECTION_LANGUAGES, count_patterns,
                              get_detection_patterns, has_detection_patterns)


def _funcs(language, cat):
    return [p["func"] for p in get_detection_patterns(language, cat)]


def _matches(language, cat, line):
    """Funciones cuyo patrón hace match con ``line``."""
    return [p["func"] for p in get_detection_patterns(language, cat)
            if re.search(p["regex"], line, re.IGNORECASE)]


def test_every_pattern_is_well_formed():
    for lang in DETECTION_LANGUAGES + ("makefile", "dockerfile"):
        table = get_detection_patterns(lang)
        assert set(table) == set(CATEGORIES)
        for cat in CATEGORIES:
            for p in table[cat]:
                assert set(p) == {"regex", "func", "description"}
                assert p["func"] and p["description"]
                re.compile(p["regex"])


def test_pattern_library_size():
    total = sum(count_patterns(lang)["total"] for lang in DETECTION_LANGUAGES)
    assert total > 600
    assert count_patterns("python") == {"input": 19, "output": 19, "dependency": 3, "total": 41}
    assert count_patterns("sql")["dependency"] == 0


@pytest.mark.parametrize("language, minimum", [
    ("r", 60), ("python", 40), ("julia", 25), ("javascript", 60), ("typescript", 80),
    ("go", 40), ("rust", 45), ("java", 60), ("c", 20), ("cpp", 35),
    ("matlab", 35), ("ruby", 50), ("lua", 15), ("wgsl", 15),
])
def test_minimum_counts(language, minimum):
    assert count_patterns(language)["total"] >= minimum


def test_python_functions():
    assert "pd.read_csv" in _funcs("python", "input")
    assert "json.load" in _funcs("python", "input")
    assert "df.to_csv" in _funcs("python", "output")
    assert "plt.savefig" in _funcs("python", "output")
    assert "import" in _funcs("python", "dependency")


def test_r_functions():
    assert {"read.csv", "readRDS", "fread", "read_excel"} <= set(_funcs("r", "input"))
    assert {"write.csv", "saveRDS", "ggsave"} <= set(_funcs("r", "output"))
    assert _funcs("r", "dependency") == ["source", "sys.source"]


def test_systems_languages():
    assert {"os.Open", "os.ReadFile", "sql.Open"} <= set(_funcs("go", "input"))
    assert {"os.Create", "os.WriteFile"} <= set(_funcs("go", "output"))
    assert {"File::open", "fs::read_to_string", "serde_json::from_reader"} <= set(_funcs("rust", "input"))
    assert {"File::create", "fs::write"} <= set(_funcs("rust", "output"))
    assert {"new FileInputStream", "Files.readAllLines", "executeQuery"} <= set(_funcs("java", "input"))
    assert {"new FileOutputStream", "Files.write"} <= set(_funcs("java", "output"))
    assert {"fopen", "fread", "fgets"} <= set(_funcs("c", "input"))
    assert {"fwrite", "fprintf"} <= set(_funcs("c", "output"))


def test_misc_languages():
    assert {"File.read", "CSV.read", "JSON.parse"} <= set(_funcs("ruby", "input"))
    assert {"File.write", "to_json"} <= set(_funcs("ruby", "output"))
    assert {"require", "require_relative"} <= set(_funcs("ruby", "dependency"))
    assert {"io.open", "io.read", "dofile"} <= set(_funcs("lua", "input"))
    assert {"readtable", "load", "imread"} <= set(_funcs("matlab", "input"))
    assert {"writetable", "save"} <= set(_funcs("matlab", "output"))
    assert {"var<uniform>", "textureSample"} <= set(_funcs("wgsl", "input"))
    assert "textureStore" in _funcs("wgsl", "output")


def test_supersets():
    for cat in CATEGORIES:
        assert set(_funcs("javascript", cat)) <= set(_funcs("typescript", cat))
        assert set(_funcs("c", cat)) <= set(_funcs("cpp", cat))
    assert "ifstream" in _funcs("cpp", "input") and "ifstream" not in _funcs("c", "input")
    assert "import type" in _funcs("typescript", "dependency")


@pytest.mark.parametrize("language, cat, line, func", [
    ("python", "input", "df = pd.read_csv('data.csv')", "pd.read_csv"),
    ("python", "output", "df.to_parquet('out.parquet')", "df.to_parquet"),
    ("r", "input", 'x <- readRDS("model.rds")', "readRDS"),
    ("r", "output", 'ggsave("plot.png")', "ggsave"),
    ("sql", "input", "SELECT * FROM customers", "FROM"),
    ("sql", "output", "CREATE TABLE summary AS", "CREATE TABLE"),
    ("javascript", "input", "const d = fs.readFileSync('in.json')", "fs.readFileSync"),
    ("javascript", "dependency", "const x = require('./util')", "require"),
    ("go", "input", 'f, err := os.Open("data.txt")', "os.Open"),
    ("rust", "output", 'fs::write("out.txt", data)?;', "fs::write"),
    ("java", "input", 'new FileInputStream("in.bin")', "new FileInputStream"),
    ("c", "dependency", "#include <stdio.h>", "#include"),
    ("cpp", "input", 'std::ifstream in("data.txt");', "ifstream"),
    ("ruby", "input", "rows = CSV.read('rows.csv')", "CSV.read"),
    ("lua", "input", 'local f = io.open("cfg.lua")', "io.open"),
    ("wgsl", "output", "textureStore(out_tex, coords, color);", "textureStore"),
])
def test_regex_matches_code(language, cat, line, func):
    assert func in _matches(language, cat, line)


def test_build_file_tables_order():
    assert _funcs("makefile", "input") == ["include", "$(wildcard)", "$(shell cat)", "$(file <)"]
    assert _funcs("makefile", "output") == ["target rule", "> (output redirect)", "install"]
    assert _funcs("dockerfile", "input") == ["FROM", "COPY", "ADD", "COPY --from"]
    assert _funcs("dockerfile", "output")[0] == "EXPOSE"
    assert _funcs("dockerfile", "dependency")[-1] == "RUN"


def test_lookup_is_case_insensitive_and_copies():
    assert has_detection_patterns("Python")
    assert not has_detection_patterns("cobol")
    assert not has_detection_patterns(None)
    pats = get_detection_patterns("python", "input")
    pats[0]["func"] = "changed"
    assert get_detection_patterns("python", "input")[0]["func"] == "pd.read_csv"


def test_invalid_language_and_type():
    with pytest.raises(ValueError, match="Unsupported language"):
        get_detection_patterns("cobol")
    with pytest.raises(ValueError, match="Invalid type"):
        get_detection_patterns("python", "outputs")
