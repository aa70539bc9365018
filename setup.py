# setup.py
from setuptools import setup, find_packages

setup(
    name="robots_txt",
    version="0.1.0",
    description="Robots Exclusion Protocol (RFC 9309) matcher with a longest-match strategy",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "click>=8.1",
        "pydantic>=2.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["robots-txt=robots_txt.cli:cli"],
    },
    python_requires=">=3.11",
)
