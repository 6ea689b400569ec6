# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

from calcnum import __version__

# -- Project information -----------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#project-information

project = 'calcnum'
version = __version__  # Short X.Y version.
release = version  # Full version, including alpha/beta/rc tags.

# -- General configuration ---------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#general-configuration

extensions = ['sphinx.ext.autodoc',
              'sphinx.ext.autosummary',
              'sphinx.ext.doctest',
              'sphinx.ext.napoleon',
              'sphinx.ext.todo']
templates_path = ['_templates']
exclude_patterns = []

autodoc_default_options = {
    'members': True,
    'exclude-members': '__dict__, __hash__, __module__, __weakref__'}

todo_include_todos = True

# -- Options for HTML output -------------------------------------------
# https://www.sphinx-doc.org/en/master/usage/configuration.html#options-for-html-output

html_theme = 'pydata_sphinx_theme'
html_static_path = ['_static']
