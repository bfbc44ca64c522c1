#!/usr/bin/env python
"""Setup script for verrange package."""

import os
import re
from setuptools import setup, find_packages


# Read the long description from README.md
def read_long_description():
    """Read the long description from README.md."""
    with open("README.md", "r", encoding="utf-8") as fh:
        return fh.read()


def get_version():
    """Get the package version from version.py."""
    # Read version from version.py, no fallbacks
    try:
        with open(os.path.join("verrange", "version.py"), "r") as f:
            version_content = f.read()
            version_match = re.search(
                r'__version__\s*=\s*["\']([^"\']+)["\']', version_content
            )
            if version_match:
                return version_match.group(1)
            else:
                raise ValueError("Could not find __version__ in version.py")
    except (IOError, FileNotFoundError) as e:
        raise RuntimeError(f"Could not read version from version.py: {e}")


setup(
    name="verrange",
    version=get_version(),
    description="Parse version strings and version ranges, and check one against the other",
    long_description=read_long_description(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    entry_points={
        "console_scripts": [
            "verrange=verrange.cli:main",
        ],
    },
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
