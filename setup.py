#!/usr/bin/env python3
"""
Setup script for topicsummary package.
"""

from setuptools import setup, find_packages

setup(
    name="topicsummary",
    version="0.1.0",
    description="Text reports for fitted topic models",
    author="topicsummary Team",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.24",
        "scikit-learn>=1.3",
        "typer>=0.9",
        "rich>=13.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
        ],
    },
    entry_points={
        "console_scripts": [
            "topicsummary=topicsummary.cli.main:app",
        ],
    },
)
