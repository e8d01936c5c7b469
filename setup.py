"""Setup configuration for bemkit package."""

from setuptools import setup, find_packages

setup(
    name="bemkit",
    version="0.1.0",
    description="BEM (Block-Element-Modifier) CSS class name grammar, validation and conversion",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "ruff>=0.1.0",
            "mypy>=1.5.0",
            "black>=23.0.0",
        ],
    },
)
