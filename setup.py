#!/usr/bin/env python3
"""
Setup script for SQL Error Translator package.
"""

from setuptools import setup, find_packages

# Read version from package metadata without importing dependencies
version = {}
with open("sql_error_translator/__init__.py") as f:
    for line in f:
        if line.startswith("__") and "=" in line and not line.startswith("__all__"):
            exec(line, version)
        if line.startswith("__status__"):
            break

# Read requirements
with open("requirements.txt") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

setup(
    name="sql-error-translator",
    version=version["__version__"],
    author=version["__author__"],
    description=version["__description__"],
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["sql_error_translator", "sql_error_translator.*"]),
    package_data={"sql_error_translator": ["data/*.json"]},
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Database",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords="database sql error translation sqlstate postgresql mysql",
    project_urls={
        "Source": "https://github.com/example/sql-error-translator",
        "Bug Reports": "https://github.com/example/sql-error-translator/issues",
    },
)
