#!/usr/bin/env python3
"""
minilang
A small imperative teaching language: lexical front end.
"""

from setuptools import setup, find_packages
import os
import re
import sys

# Ensure Python 3.8+
if sys.version_info < (3, 8):
    raise RuntimeError("minilang requires Python 3.8 or later")

# Read version from __init__.py
here = os.path.abspath(os.path.dirname(__file__))
version_file = os.path.join(here, "minilang", "__init__.py")
version = "0.1.0"
if os.path.exists(version_file):
    with open(version_file, encoding="utf-8") as f:
        match = re.search(r'^__version__ = "([^"]+)"', f.read(), re.MULTILINE)
        if match:
            version = match.group(1)

# Read README
readme_file = os.path.join(here, "README.md")
with open(readme_file, "r", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="minilang",
    version=version,
    description="Hand-written tokenizer for a small imperative teaching language",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="xwest",
    license="MIT",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        # Core has no external dependencies for from-scratch implementation
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "pytest-benchmark>=4.0.0",
            "black>=23.3.0",
            "flake8>=6.0.0",
            "mypy>=1.4.0",
            "isort>=5.12.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "minilang-lex=minilang.cli:main",  # Token dump
        ],
    },
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Compilers",
    ],
    keywords=["programming-language", "compiler", "lexer", "tokenizer"],
    zip_safe=False,
    platforms=["Windows", "Linux", "macOS"],
)
