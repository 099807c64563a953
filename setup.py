"""
setup.py

Сборка пакета Markov Decision Pegs.

Использование:
    pip install -e .            # движок + веб API
    pip install -e .[test]      # + pytest
"""

from setuptools import setup, find_packages

setup(
    name="markov_pegs",
    version="1.0.0",
    description="Triangular peg solitaire engine with fuzzy moves and state-space analysis",
    packages=find_packages(exclude=("tests", "tests.*")),
    py_modules=["game", "main"],
    python_requires=">=3.8",
    install_requires=[
        "flask>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "markov-pegs=main:main",
        ],
    },
    zip_safe=False,
)
