#!/usr/bin/env python3
from setuptools import setup, find_packages

setup(
    name="quick-question",
    version="0.1.0",
    description="Quick Question - Get fast answers in your terminal",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["qq"],
    package_data={"qq_cli": ["assets/*.md"]},
    install_requires=[
        "litellm>=1.0.0",
        "rich>=13.0.0",
        "prompt_toolkit>=3.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "qq=qq_cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Utilities",
    ],
    python_requires=">=3.8",
)
