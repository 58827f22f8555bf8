# -*- coding: utf-8 -*-

import os
import re

from setuptools import setup

extras_require = {
    "test": [
        "pytest>=6.2.5",
        "pytest-cov>=2.10",
        "pytest-instafail>=0.4",
        "pytest-xdist>=2.5",
        "pytest-split>=0.7.0",
        "hypothesis>=6.0",
    ],
    "lint": [
        "black==23.12.0",
        "flake8==6.1.0",
        "flake8-bugbear==23.12.2",
        "flake8-use-fstring==1.4",
        "isort==5.13.2",
        "mypy==1.5",
    ],
    "dev": ["ipython", "pre-commit", "twine"],
}

extras_require["dev"] = extras_require["test"] + extras_require["lint"] + extras_require["dev"]

with open("README.md", "r") as f:
    long_description = f.read()


# the version lives in a module so that it is available without the
# package metadata (e.g. when running from a source checkout)
def _get_version():
    version_file = os.path.join("checkedint", "version.py")
    with open(version_file, "r") as f:
        match = re.search(r'^version = "([^"]+)"', f.read(), re.M)
    if match is None:
        raise RuntimeError(f"unable to find version string in {version_file}")
    return match.group(1)


setup(
    name="checkedint",
    version=_get_version(),
    description="Checked arithmetic on fixed-width integers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="checkedint developers",
    author_email="",
    license="Apache License 2.0",
    keywords="integer overflow checked arithmetic safe numerics",
    include_package_data=True,
    packages=["checkedint", "checkedint.types"],
    python_requires=">=3.10,<4",
    install_requires=[],
    tests_require=extras_require["test"],
    extras_require=extras_require,
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
