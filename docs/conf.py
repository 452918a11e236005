"""Configuration file for the Sphinx documentation builder.

This file only contains a selection of the most common options. For a full
list see the documentation:
https://www.sphinx-doc.org/en/master/usage/configuration.html
"""

import os
import shutil
import subprocess

from ccmath.float_wrapper import float_type_dict

# -- Project information -----------------------------------------------------
project = "CCMath"
copyright = "2021, CCMath developers"  # pylint: disable=redefined-builtin
author = "CCMath developers"

# -- General configuration ---------------------------------------------------
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.doctest",
    "sphinx.ext.intersphinx",
    "sphinx.ext.mathjax",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx_gallery.gen_gallery",
]
exclude_patterns = [
    ".DS_Store",
    "Thumbs.db",
    "_build",
]
source_suffix = [
    ".rst",
]

# -- Options for HTML output -------------------------------------------------
html_theme = "sphinx_rtd_theme"
html_title = "CCMath"
viewcode_follow_imported_members = True

# -- Options for API ---------------------------------------------------------
add_module_names = False

# Cross-referencing configuration
default_role = "py:obj"
primary_domain = "py"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable", None),
}

# -- Generate API skeleton ----------------------------------------------------
shutil.rmtree("api", ignore_errors=True)
subprocess.call(
    " ".join(
        [
            "sphinx-apidoc",
            "-o api/",
            "--force",
            "--no-toc",
            "--separate",
            "../ccmath/",
            # exclude patterns
            "../ccmath/tests",
        ]
    ),
    shell=True,
)


# -- Generate available float types -------------------------------------------
def gen_float_types():
    float_type_doc = """
---------------------
Available Float Types
---------------------

"""
    for idx, (k, v) in enumerate(float_type_dict.items(), 1):
        float_type_doc += '\n{}. :code:`"{}"` (``numpy.{}``)\n'.format(
            idx, k, v.np_dtype.name
        )

    with open(
        os.path.dirname(os.path.abspath(__file__)) + "/float_types.rst", "w"
    ) as f:
        f.write(float_type_doc)


gen_float_types()


sphinx_gallery_conf = {
    "examples_dirs": "../examples",  # path to your example scripts
    "gallery_dirs": "auto_examples",  # path to where to save gallery generated output
    "line_numbers": True,
    "run_stale_examples": True,
    "filename_pattern": "/ex",
}
