# setup.py
from setuptools import setup, find_packages

setup(
    name="trading_dashboard",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pandas",
        "numpy",
        "pyqtgraph",
        "PyQt6",
        "python-dotenv",
        "requests",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "trading-dashboard=trading_dashboard.main:main",
        ],
    },
)
