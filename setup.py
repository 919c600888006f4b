from setuptools import find_packages, setup

setup(
    name="yor",
    version="0.1.0",
    description="Yor - tag change reports for infrastructure-as-code resources",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "rich",  # Terminal formatting
        "pydantic>=2",  # Report models and config validation
        "typer",  # CLI
        "click",  # Imported directly by yor.cli
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
    entry_points={
        "console_scripts": [
            "yor=yor.cli:main",
        ],
    },
)
