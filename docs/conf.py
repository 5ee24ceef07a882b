"""Sphinx configuration for timeseries-sim."""

project = "timeseries-sim"
copyright = "2026, timeseries-sim contributors"
author = "timeseries-sim contributors"
version = "0.1.0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "myst_parser",
]

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

html_theme = "sphinx_rtd_theme"

# MyST settings for markdown
myst_enable_extensions = [
    "colon_fence",
    "deflist",
]

# Napoleon settings for docstrings
napoleon_google_docstring = True
napoleon_numpy_docstring = True
