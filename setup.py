from setuptools import find_packages, setup

setup(
    name="linkmirror",
    version="0.1.0",
    description="Link integrity checks and anchor correction for translated Markdown trees",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output schemas
        "typer<0.26",  # CLI (0.26+ vendors its own click, breaking click.get_current_context)
        "click",  # Usage errors raised through Typer
        "rich",  # Terminal formatting
        "PyYAML",  # Front matter and YAML output
        "markdown-it-py>=3.0",  # Markdown syntax tree
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "pre-commit",  # Git hook management
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
            "types-setuptools",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "linkmirror=linkmirror.cli:main",
        ],
    },
)
