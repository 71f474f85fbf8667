# setup.py
from setuptools import setup, find_packages

setup(
    name="ssimulacra",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "opencv-python-headless",
        "Pillow>=11.3",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "ssimulacra=ssimulacra.cli:main"
        ]
    },
)
