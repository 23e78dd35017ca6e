from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

from loopfpy import __version__  # noqa: E402

project = "loopfpy"
author = "loopfpy developers"
copyright = f"2026, {author}"
version = release = __version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx.ext.mathjax",
    "sphinx.ext.napoleon",
    "autoapi.extension",
    "myst_parser",
    "sphinx_autodoc_typehints",
    "sphinx_copybutton",
]

exclude_patterns: list[str] = ["_build"]
source_suffix = {".rst": "restructuredtext", ".md": "markdown"}

# the physics modules use numpy-style docstrings, the helpers Google-style
napoleon_numpy_docstring = True
napoleon_google_docstring = True
napoleon_include_private_with_doc = False

myst_enable_extensions = ["dollarmath", "colon_fence"]

autodoc_typehints = "none"
typehints_document_rtype = True

autoapi_type = "python"
autoapi_dirs = [str(ROOT / "loopfpy")]
autoapi_root = "autoapi"
autoapi_ignore = ["*benchmark*"]
autoapi_keep_files = True
autoapi_options = ["members", "show-module-summary"]

intersphinx_mapping = {
    "python": ("https://docs.python.org/3/", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "scipy": ("https://docs.scipy.org/doc/scipy/", None),
    "pandas": ("https://pandas.pydata.org/docs/", None),
}

html_theme = "pydata_sphinx_theme"
html_title = "loopfpy documentation"
