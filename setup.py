#!/usr/bin/env python
"""
Setup.py for algsgraph.
"""

from setuptools import setup, find_packages

setup(
    name="algsgraph",
    version="0.1.0",
    description="Abstract graph contract for the algs4 teaching library",
    packages=find_packages(include=["algsgraph", "algsgraph.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
