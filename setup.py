"""Setup script for portpicker"""

from setuptools import setup, find_packages

setup(
    name="portpicker-dualstack",
    version="1.0.0",
    packages=find_packages(include=["portpicker", "portpicker.*"]),
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    author="portpicker developers",
    description="Find an unused TCP/UDP port on the local host",
    entry_points={
        "console_scripts": [
            "portpicker=portpicker.main:main",
        ],
    },
)
