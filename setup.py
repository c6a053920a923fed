"""
lrukit - Fixed-capacity LRU cache

A bounded key/value cache with O(1) get, put and delete that evicts the
least recently used entry on overflow.
"""

import os
import re
from setuptools import setup, find_packages

# Read the README for the long description
with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

# Get package version
with open(os.path.join("lrukit", "__init__.py"), "r", encoding="utf-8") as f:
    version_match = re.search(r'^__version__ = ["\']([^\"\']+)[\"\']', f.read(), re.MULTILINE)
    if version_match:
        VERSION = version_match.group(1)
    else:
        raise RuntimeError("Unable to find version string in lrukit/__init__.py")

# Core dependencies
install_requires = [
    "typing-extensions>=4.0.0",
]

# Optional dependencies
extras_require = {
    # Development and testing
    "dev": [
        "pytest>=7.0.0",
        "pytest-cov>=4.0.0",
        "black>=22.0.0",
        "isort>=5.0.0",
        "mypy>=0.990",
    ],
}

setup(
    name="lrukit",
    version=VERSION,
    author="lrukit developers",
    description="A fixed-capacity least-recently-used cache with O(1) operations",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "examples", "examples.*"]),
    package_data={
        "lrukit": ["py.typed"],
    },
    python_requires=">=3.8",
    install_requires=install_requires,
    extras_require=extras_require,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development",
        "Topic :: Software Development :: Libraries",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Typing :: Typed",
    ],
    keywords=[
        "cache",
        "lru",
        "memoization",
        "eviction",
    ],
    zip_safe=False,
)
