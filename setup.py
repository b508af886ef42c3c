"""
Setup script for the Password Analyzer package.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="password-analyzer",
    version="0.1.0",
    author="Password Analyzer Team",
    author_email="example@example.com",
    description="Password strength analyzer and random password generator",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/example/password-analyzer",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Security",
        "Topic :: Utilities",
    ],
    python_requires=">=3.7",
    install_requires=[
        "tqdm>=4.50.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "password-analyzer=password_analyzer.cli:main",
        ],
    },
)
