from setuptools import setup, find_packages

setup(
    name="multiconnect",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy",
        "gymnasium",
        "pygame",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "multiconnect=multiconnect.interfaces.cli:main",
        ],
    },
)
