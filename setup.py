# setup.py
from setuptools import setup, find_packages

setup(
    name="game-engine-math",
    version="0.1.0",
    description="Exact-arithmetic 3D linear algebra for the game engine",
    packages=find_packages(include=["game_engine_math", "game_engine_math.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
