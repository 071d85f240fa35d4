"""Sphinx configuration of the multidimgrid documentation."""

from datetime import date

from multidimgrid import __version__

project = "multidimgrid"
author = "multidimgrid developers"
copyright = f"{date.today().year}, {author}"
release = __version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.intersphinx",
    "sphinx.ext.mathjax",
    "sphinx.ext.napoleon",
]

default_role = "obj"
autosummary_generate = True
napoleon_google_docstring = False
napoleon_numpy_docstring = True

html_theme = "sphinx_immaterial"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3/", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "matplotlib": ("https://matplotlib.org/stable/", None),
}
