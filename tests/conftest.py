"""Pytest fixtures for string_source_map tests"""

import pytest


def _strings_xml(*elements):
    body = "\n".join("    " + e for e in elements)
    return f'<?xml version="1.0" encoding="utf-8"?>\n<resources>\n{body}\n</resources>\n'


@pytest.fixture
def project(tmp_path):
    """A project root with helpers to lay out res dirs and R.txt"""

    class Project:
        root = tmp_path

        def res_dir(self, name, *elements, raw=None):
            values = tmp_path / name / "values"
            values.mkdir(parents=True)
            text = raw if raw is not None else _strings_xml(*elements)
            (values / "strings.xml").write_text(text, encoding="utf-8")
            return name

        def r_txt(self, text, name="gen"):
            d = tmp_path / name
            d.mkdir(parents=True, exist_ok=True)
            (d / "R.txt").write_text(text, encoding="utf-8")
            return name

    return Project()
