"""Package setup for image_spider."""

from setuptools import setup, find_packages

setup(
    name="image-spider",
    version="1.0.0",
    description="Recursive, depth-bounded crawler that downloads the images of a website",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "aiohttp>=3.9.0",
        "beautifulsoup4>=4.12.0",
        "lxml>=5.0.0",
        "tqdm>=4.66.0",
        "colorlog>=6.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "image-spider=image_spider.cli:main",
        ],
    },
)
