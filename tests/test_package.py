import ast
from pathlib import Path

import pytest

import mdpdf

LICENSE_LINE = "MIT License - Copyright (c) 2025 Markdown to PDF Converter"
MODULES = sorted(Path(mdpdf.__file__).parent.glob("*.py"))


@pytest.mark.parametrize("module", MODULES, ids=lambda path: path.name)
def test_module_docstring_carries_license(module: Path) -> None:
    docstring = ast.get_docstring(ast.parse(module.read_text(encoding="utf-8")))
    assert docstring is not None
    assert LICENSE_LINE in docstring
