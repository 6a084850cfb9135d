from setuptools import find_packages, setup

setup(
    name="sumdir",
    version="0.3.0",
    description="Summarize the contents of a directory tree by extension and content type",
    packages=find_packages(include=["sumdir", "sumdir.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.12",  # Command-line interface
        "click>=8.2",  # Typer's parser; separate stdout/stderr in CliRunner
        "rich",  # Terminal formatting for diagnostics
        "pydantic>=2.0",  # Configuration and output schemas
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "sumdir=sumdir.cli:main",
        ],
    },
)
