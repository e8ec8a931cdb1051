#!/usr/bin/env python3

from setuptools import setup, find_packages

setup(
    name="submission-gate",
    version="1.0.0",
    description="Static gate for automatically reviewed front-end project submissions",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.8",
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'submission-gate=submission_gate.main:main',
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Topic :: Software Development :: Quality Assurance",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
