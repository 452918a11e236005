from setuptools import setup, find_packages

version = {}
with open("ccmath/version.py") as fp:
    exec(fp.read(), version)
# later on we use: version['__version__']

with open("README.md", "r") as fh:
    long_description = fh.read()

name = "ccmath"

setup(
    name=name,
    version=version["__version__"],
    author="CCMath developers",
    description="Complex-number arithmetic and transcendental functions over any float width",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="",
    packages=find_packages(exclude=["benchmarks", "docs", "examples"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.7",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "sympy", "pytest-benchmark"],
        "doc": [
            "sphinx",
            "sphinx_rtd_theme",
            "sphinx-gallery",
            "matplotlib",
        ],
    },
    command_options={
        "build_sphinx": {
            "project": ("setup.py", name),
            "version": ("setup.py", version["__version__"]),
            "release": ("setup.py", version["__version__"]),
            "source_dir": ("setup.py", "docs"),
        }
    },
)
