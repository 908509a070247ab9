import os

from setuptools import find_packages, setup

setup(
    name="sieve",
    version="0.1.0",
    packages=find_packages(include=["sieve", "sieve.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "hypothesis>=6.100",
        ],
    },
    author="Sieve Contributors",
    description="Composable validation of untyped data with path-aware issues",
    long_description=open("README.md").read()
    if os.path.exists("README.md")
    else "",
    long_description_content_type="text/markdown",
)
