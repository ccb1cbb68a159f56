#!/usr/bin/env python3
"""
Setup script for swimclub-e2e.

Install with `pip install -e '.[dev]'`, then fetch a browser build with
`playwright install chromium`.
"""

import re
import sys
from pathlib import Path

if sys.version_info < (3, 11):
    sys.exit("Error: swimclub-e2e requires Python 3.11 or higher.")

from setuptools import find_packages, setup

version_file = Path(__file__).parent / "src" / "swimclub_e2e" / "__version__.py"
version_match = re.search(
    r'^__version__\s*=\s*["\']([^"\']+)["\']',
    version_file.read_text(encoding="utf-8"),
    re.M,
)
version = version_match.group(1) if version_match else "0.1.0"

readme_path = Path(__file__).parent / "README.md"
if readme_path.exists():
    long_description = readme_path.read_text(encoding="utf-8")
    long_description_content_type = "text/markdown"
else:
    long_description = "End-to-end UI test suite for the HNT Swim Club storefront"
    long_description_content_type = "text/plain"

# Core dependencies
install_requires = [
    "playwright>=1.40.0",
    "pydantic>=2.5.0",
    "pydantic-settings>=2.1.0",
    "python-dotenv>=1.0.0",
    "requests>=2.31.0",
]

# Development dependencies
extras_require = {
    "dev": [
        "pytest>=7.4.0",
        "pytest-asyncio>=0.23.0",
        "pytest-cov>=4.1.0",
        "Flask>=3.0.0",
        "black>=23.0.0",
        "flake8>=6.1.0",
        "mypy>=1.7.0",
    ],
}

setup(
    name="swimclub-e2e",
    version=version,
    description="End-to-end UI test suite for the HNT Swim Club storefront",
    long_description=long_description,
    long_description_content_type=long_description_content_type,
    author="HNT Swim Club QA",
    license="MIT",
    python_requires=">=3.11",
    packages=find_packages("src"),
    package_dir={"": "src"},
    install_requires=install_requires,
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "swimclub-e2e=swimclub_e2e.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Testing",
    ],
    keywords=["e2e", "playwright", "page-object", "ui-testing"],
)
