#!/usr/bin/env python3

import os
from setuptools import setup, find_packages

THIS_DIRECTORY = os.path.dirname(os.path.realpath(__file__))

NAME = "substrate_decoder"

with open(os.path.join(THIS_DIRECTORY, "README.md"), encoding="utf-8") as fh:
    long_description = fh.read()

with open(os.path.join(THIS_DIRECTORY, NAME, "VERSION"), encoding="utf-8") as fh:
    version = fh.read().strip()

setup(
    name="substrate-decoder",
    version=version,
    packages=find_packages(exclude=["tests"]),
    install_requires=["substrate-interface>=1.7,<2"],
    extras_require={"test": ["pytest"]},
    description="Command line tool decoding blocks and storage items of a Substrate node",
    long_description=long_description,
    long_description_content_type="text/markdown",
    include_package_data=True,
    package_data={NAME: ["VERSION"]},
    keywords="substrate polkadot blockchain decoder",
    zip_safe=False,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Operating System :: OS Independent",
        "Intended Audience :: Developers",
    ],
    python_requires=">=3.7.0",
    entry_points={
        "console_scripts": ["substrate-decoder = substrate_decoder.cli:main"]
    },
)
