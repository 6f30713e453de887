#!/usr/bin/env python3
# setup.py: install gh-local-sync
#
# Install:
#   pip install -e .            (runtime)
#   pip install -e ".[test]"    (with pytest)
#
# Run:
#   gh-local-sync

from setuptools import setup, find_packages

try:
    with open("README.md", "r", encoding="utf-8") as fh:
        long_description = fh.read()
except FileNotFoundError:
    long_description = "Clone missing and pull all GitHub repositories of a user or organization"

setup(
    name="gh-local-sync",
    version="1.0.0",
    description="Interactive clone-missing / pull-all for GitHub repositories",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "colorama>=0.4.6",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "gh-local-sync=gh_local_sync.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Version Control :: Git",
        "Programming Language :: Python :: 3",
    ],
)
