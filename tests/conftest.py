import textwrap

import pytest


@pytest.fixture
def write(tmp_path):
    """write("a/b.py", "...") -> Path, creando carpetas intermedias."""
    def _write(name, text=""):
        p = tmp_path / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(textwrap.dedent(text).lstrip("\n"), encoding="utf-8")
        return p
    return _write
