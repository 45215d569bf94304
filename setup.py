#!/usr/bin/env python3

import pathlib

from setuptools import find_packages, setup

HERE = pathlib.Path(__file__).parent

# Handle README.md that might not exist in Docker build
try:
    README = (HERE / "README.md").read_text()
except FileNotFoundError:
    README = "Magic number based file type detection"

setup(
    name="magicsniff",
    version="1.0.0",
    description="Magic number based file type detection",
    long_description=README,
    long_description_content_type="text/markdown",
    author="Marc Rivero",
    author_email="mriverolopez@gmail.com",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Information Technology",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.13",
        "Topic :: Security",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.10",
    install_requires=[
        "python-magic>=0.4.27",
        "rich>=13.7.0",
        "click>=8.2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "magicsniff=magicsniff.__main__:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
