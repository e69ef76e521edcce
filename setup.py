from setuptools import find_packages, setup

# Define core requirements
core_requirements = [
    "nltk>=3.8.1",
    "pydantic>=2.0",
    "typer>=0.9.0",
    "tqdm>=4.65.0",
]

# Define development requirements
dev_requirements = [
    "pytest>=7.3.1,<9.0.0",
    "pytest-asyncio>=0.21.0",
]

setup(
    name="bookwords",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=core_requirements,
    extras_require={
        "dev": dev_requirements,
        "test": dev_requirements,
    },
    entry_points={
        "console_scripts": [
            "bookwords=bookwords.cli.main:run",
        ],
    },
    python_requires=">=3.9",
    description="Vocabulary and word frequency extraction for English books",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
