#!/usr/bin/env python
"""Setup script for the tablejson library."""
from pathlib import Path
from setuptools import setup, find_packages

# 프로젝트 루트 디렉토리
here = Path(__file__).parent.resolve()

# README 읽기
long_description = (here / "README.md").read_text(encoding="utf-8")

version = "0.1.0"

setup(
    name="tablejson",
    version=version,
    description="Convert host-runtime table values to and from JSON text",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="json lua table encoding decoding",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",

    # 기본 의존성
    install_requires=[
        "orjson>=3.8.0",
        "xxhash>=3.0.0",
        "tqdm>=4.65.0",
    ],

    # 선택적 의존성
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
        ],
    },

    # CLI 엔트리 포인트
    entry_points={
        "console_scripts": [
            "tablejson=tablejson.cli:main",
        ],
    },
    zip_safe=False,
)
