# setup.py
from setuptools import setup, find_packages

setup(
    name="sitemap_batcher",
    version="0.1.0",
    description="Sitemap discovery of product pages exported as fixed-size URL batches",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=[
        "aiohttp>=3.9",
        "lxml>=5.0",
        "pydantic>=2.5",
        "PyYAML>=6.0",
        "click>=8.1",
        "boto3>=1.34",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "sitemap-batcher=sitemap_batcher.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
