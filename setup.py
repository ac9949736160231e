from setuptools import setup, find_packages

setup(
    name = "trackademic",
    version = "0.1.0",
    packages = find_packages(include=["trackademic", "trackademic.*"]),
    install_requires=[
        "aiofiles",
        "aiohttp",
        "loguru",
        "pydantic>=2.0",
        "PyYAML",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio==1.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "trackademic = trackademic.cli:main",
        ],
    },
    python_requires = ">=3.9",
)
