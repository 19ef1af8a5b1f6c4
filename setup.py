"""Setup script for LinguaBridge."""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README
readme = Path(__file__).parent.joinpath("README.md").read_text(encoding="utf-8")

setup(
    name="linguabridge",
    version="2.0.0",
    description="Real-time text translation relay with provider fallback and content filtering",
    long_description=readme,
    long_description_content_type="text/markdown",
    author="LinguaBridge Team",
    license="MIT",

    packages=find_packages(exclude=["tests*", "docs*", "examples*"]),
    package_data={
        "linguabridge.translation.phrases": ["*.json"],
    },
    include_package_data=True,

    python_requires=">=3.9",

    install_requires=[
        "pyyaml>=6.0",
        "rich>=13.0.0",
        "python-dotenv>=1.0.0",
        "requests>=2.31.0",
        "typer>=0.9.0",
        "loguru>=0.7.0",
        "httpx>=0.24.0"
    ],

    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "pytest-asyncio>=0.21.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.4.0",
            "isort>=5.12.0"
        ],
    },

    entry_points={
        "console_scripts": [
            "linguabridge=cli.commands.main:cli",
        ],
    },

    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Text Processing :: Linguistic",
    ],

    keywords="translation chat relay mymemory libretranslate",
)
