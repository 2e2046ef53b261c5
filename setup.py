#!/usr/bin/env python3
import pathlib

import setuptools

version = {}
exec(pathlib.Path("marktimer/version.py").read_text(), version)

setuptools.setup(
    author="Seer",
    author_email="engineering-admin@helloseer.com",
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
    ],
    description="Measure time elapsed between successive marks",
    extras_require={"dev": ["black", "isort", "pytest", "pytype", "twine"]},
    long_description=pathlib.Path("README.md").read_text(),
    long_description_content_type="text/markdown",
    name="marktimer",
    packages=["marktimer"],
    project_urls={
        "Issues": "https://github.com/helloseer/marktimer",
    },
    python_requires=">=3.10.0",
    version=version["__version__"],
)
