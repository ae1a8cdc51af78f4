# setup.py
from setuptools import find_packages, setup

setup(
    name="skim",
    version="0.1.0",
    description="A small tree-walking Scheme interpreter with an exact numeric tower",
    packages=find_packages(include=["skim", "skim.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["skim = skim.repl:main"],
    },
    zip_safe=False,
)
