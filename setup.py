from setuptools import find_packages, setup

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

requirements = [
    "httpx>=0.25.0",
    "yt-dlp>=2024.1.1",
    "PyYAML>=6.0",
    "click>=8.1.0",
    "fastapi>=0.100.0",
    "uvicorn>=0.23.0",
]

test_requirements = [
    "pytest>=7.4.0",
    "pytest-asyncio>=0.21.0",
]

setup(
    name="editfinder",
    version="1.0.0",
    author="Editfinder Team",
    description="Discover video-editing tutorials and short-form clips on YouTube",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={"test": test_requirements},
    entry_points={
        "console_scripts": [
            "editfinder=editfinder.cli:cli",
        ],
    },
)
