from setuptools import find_packages, setup

setup(
    name="devlog",
    version="0.1.0",
    description="Developer activity log - periodic diff snapshots of watched git repositories",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI; 0.26+ vendors click, which the code imports directly
        "click",  # Context and exceptions used alongside typer
        "pydantic>=2",  # Config, wire messages, output schemas
        "rich",  # Terminal formatting
        "PyYAML",  # YAML command output
        "pygments",  # Highlighted command output on a TTY
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
            "types-PyYAML",  # Type stubs
        ],
    },
    entry_points={
        "console_scripts": [
            "devlog=devlog.cli:main",
        ],
    },
)
