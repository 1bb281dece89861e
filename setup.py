"""A setuptools based setup module.
See:
https://packaging.python.org/guides/distributing-packages-using-setuptools/
https://github.com/pypa/sampleproject
"""

# Always prefer setuptools over distutils
from setuptools import setup, find_packages
import os.path

# Get eschermap's version number
# See https://packaging.python.org/guides/single-sourcing-package-version/
def get_version(rel_path):
    here = os.path.abspath(os.path.dirname(__file__))
    with open(os.path.join(here, rel_path), "r") as fp:
        for line in fp.read().splitlines():
            if line.startswith("__version__"):
                delim = '"' if '"' in line else "'"
                return line.split(delim)[1]
        else:
            raise RuntimeError("Unable to find version string.")


setup(
    name="eschermap",
    version=get_version("eschermap/__init__.py"),
    description="Draw Escher metabolic maps as vector graphics",
    url="https://github.com/dbrnz/eschermap",
    author="David Brooks",
    author_email="d.brooks@auckland.ac.nz",
    classifiers=[
        # How mature is this project? Common values are
        #   3 - Alpha
        #   4 - Beta
        #   5 - Production/Stable
        "Development Status :: 3 - Alpha",
        # Indicate who your project is intended for
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Visualization",
        # Pick your license as you wish
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10, <4",
    install_requires=[
        "beziers>=0.5.0",
        "lxml>=4.6.3",
        "numpy>=1.20.3",
        "pyyaml>=5.4.1",
        "shapely>=2.0",
        "structlog>=22.1",
        "tqdm>=4.61.0",
        "webcolors>=1.11.1",
    ],
    extras_require={"test": ["pytest"]},
    entry_points={
        "console_scripts": [
            "eschermap=eschermap.__main__:main",
        ],
    },
    project_urls={
        "Bug Reports": "https://github.com/dbrnz/eschermap/issues",
        "Source": "https://github.com/dbrnz/eschermap/",
    },
)
