from setuptools import setup, find_packages

setup(
    name="pytps",
    version="0.1.0",
    description="pytps: transaction processing system for undo/redo",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "pytps=pytps.main:main",
        ],
    },
)
