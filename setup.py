# -*- coding: utf-8 -*-
from setuptools import find_packages, setup

setup(
    name="hex2dec",
    version="0.1",
    description="Rewrite hexadecimal values in text as width preserving decimals.",
    author="hex2dec developers",
    python_requires=">=3.8",
    install_requires=[
        "docopt==0.6.2",
        "pyyaml==6.0.2",
    ],
    extras_require={
        "test": [
            "mock",
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "hex2dec=hex2dec.cli:main",
        ],
    },
    zip_safe=True,
    include_package_data=True,
    packages=find_packages(include=["hex2dec", "hex2dec.*", "utility"]),
)
