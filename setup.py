from setuptools import setup, find_packages

setup(
    name="boardgame-bracket",
    version="0.1.0",
    description="Weighted pairings and double elimination brackets for a board game tournament",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.22.4",
        "pandas>=1.5.3",
        "requests>=2.31.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "gamebracket=gamebracket.main:main",
        ],
    },
)
