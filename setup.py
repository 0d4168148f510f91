#!/usr/bin/env python3
"""Setup script for orthopaths."""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README file
readme_file = Path(__file__).parent / "README.md"
if readme_file.exists():
    with open(readme_file, "r", encoding="utf-8") as f:
        long_description = f.read()
else:
    long_description = "Greedy interior-disjoint shortest paths on a 4-connected obstacle grid"

test_requires = [
    "pytest>=6.0.0",
    "pytest-cov>=2.0.0",
]

setup(
    name="orthopaths",
    version="1.0.0",
    author="orthopaths developers",
    description="Greedy interior-disjoint shortest paths on a 4-connected obstacle grid",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering",
    ],
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.20.0",
        "psutil>=5.8.0",
    ],
    extras_require={
        "test": test_requires,
        "dev": test_requires,
    },
    entry_points={
        "console_scripts": [
            "orthopaths=main:main",
        ],
    },
    zip_safe=False,
)
