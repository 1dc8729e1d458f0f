from setuptools import find_packages, setup

# Define core requirements
core_requirements = [
    "pydantic>=2.5",
    "pydantic-settings>=2.1",
    "requests>=2.28.2",
    "structlog>=23.1",
    "tqdm>=4.65.0",
    "typer>=0.9",
    "urllib3>=1.26",
]

# Define development requirements
dev_requirements = [
    "pytest>=7.3.1",
]

setup(
    name="lexindex",
    version="0.1.0",
    packages=find_packages(include=["lexindex", "lexindex.*"]),
    install_requires=core_requirements,
    extras_require={
        "dev": dev_requirements,
    },
    entry_points={
        "console_scripts": [
            "lexindex=lexindex.cli.main:run",
        ],
    },
    python_requires=">=3.9",
    description="Vocabulary source loading and grouping for Ancient Greek, Hebrew and Latin",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
