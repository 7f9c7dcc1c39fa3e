"""
setup.py

Установка пакета.

Использование:
    pip install -e .            # движок, CLI и веб-API
    pip install -e ".[test]"    # + pytest
"""

from setuptools import setup, find_packages

setup(
    name="peg_puzzle",
    version="1.0.0",
    description="Peg Solitaire: board layouts, move generation and a memoized solver",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    install_requires=[
        "flask>=2.2",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "peg-puzzle=main:main",
        ],
    },
    python_requires=">=3.8",
    zip_safe=False,
)
