"""Setup file for github-ops package."""

from setuptools import setup, find_packages

setup(
    name="github-ops",
    version="0.1.0",
    description="GitHub REST API operations as composable, typed values",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "requests",
        "urllib3",
        "python-dotenv",
        "pydantic>=2"
    ],
    extras_require={
        "test": [
            "pytest",
            "responses"
        ],
        "dev": [
            "pytest",
            "responses",
            "black",
            "flake8",
            "mypy"
        ]
    }
)
