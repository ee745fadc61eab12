from setuptools import find_packages, setup

setup(
    name="vaultmend",
    version="0.1.0",
    description="Find wiki-links with no note in an Obsidian vault and create the missing notes",
    packages=find_packages(include=["vaultmend", "vaultmend.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI framework
        "rich",  # Terminal formatting
        "pydantic>=2",  # Configuration and output schemas
        "PyYAML",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "vaultmend=vaultmend.cli:main",
        ],
    },
)
