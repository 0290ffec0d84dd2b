"""
setup.py for the firefly_swarm package.

The package lives under plugins/ next to its tests. __main__.py is a
headless command line runner; the swarm itself never prints.
"""

from setuptools import setup


setup(
    name="firefly-swarm",
    version="0.1.0",
    description=(
        "Firefly Algorithm swarm with a bioluminescent flash-timing layer"
    ),
    python_requires=">=3.9",
    package_dir={"": "plugins"},
    packages=["firefly_swarm"],
    install_requires=[
        "numpy>=1.22",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
