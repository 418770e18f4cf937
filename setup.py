"""Setup script for gbm-var-simulator package."""

from setuptools import setup, find_packages

setup(
    name="gbm-var-simulator",
    version="1.0.0",
    description="Monte Carlo price distribution and Value-at-Risk using Geometric Brownian Motion",
    author="GBM Contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.20.0",
        "matplotlib>=3.3.0",
        "pandas>=1.3.0",
        "python-dotenv>=0.19.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "gbmvar=gbmvar.cli:main",
        ],
    },
)
