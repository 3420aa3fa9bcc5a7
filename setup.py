#!/usr/bin/env python3
"""
logrange server configuration setup script

Usage:
    pip install .
    pip install -e ".[test]"    # Development install with test tools
"""

from setuptools import find_packages, setup


def get_version() -> str:
    """Read __version__ from the package without importing it."""
    with open("logrange/__init__.py", encoding="utf-8") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=", 1)[1].strip().strip('"')
    raise RuntimeError("Unable to find __version__")


setup(
    name="logrange-config",
    version=get_version(),
    description="Configuration model for logrange log-storage server nodes",
    python_requires=">=3.8",
    packages=find_packages(include=["logrange", "logrange.*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "logrange=logrange.cli:main",
        ],
    },
)
