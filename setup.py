#!/usr/bin/env python3
"""
Setup script for the mdpdf Markdown to PDF converter.

After installing, fetch the browser once with:

    python -m playwright install chromium
"""

from pathlib import Path

from setuptools import setup

HERE = Path(__file__).parent


def read_requirements(name: str) -> list:
    """Requirement lines of a requirements file, without comments."""
    lines = (HERE / name).read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip() and not line.startswith("#")]


setup(
    name="mdpdf",
    version="1.0.0",
    description="Convert Markdown files to styled PDFs with headless Chromium",
    long_description=(HERE / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    license="MIT",
    packages=["mdpdf"],
    python_requires=">=3.9",
    install_requires=read_requirements("requirements.txt"),
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "mdpdf=mdpdf.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Text Processing :: Markup :: Markdown",
    ],
)
