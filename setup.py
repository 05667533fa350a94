import os

from setuptools import find_packages, setup

setup(
    name="fieldstate",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "hypothesis>=6.100.0",
        ],
    },
    author="fieldstate Contributors",
    description="Live and delayed validity tracking for a single editable field",
    long_description=open("README.md").read() if os.path.exists("README.md") else "",
    long_description_content_type="text/markdown",
)
