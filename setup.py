#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
"""The setup.py file."""

from setuptools import find_packages, setup

with open("src/qalcosonic/version.py") as fh:
    for line in fh:
        if line.strip().startswith("__version__"):
            VERSION = line.split("=")[-1].strip().strip("\"'")
            break


with open("README.md", "r") as fh:
    LONG_DESCRIPTION = fh.read()


def _requirements(file_name: str) -> list[str]:
    with open(file_name) as fh:
        return [r.strip() for r in fh if r.strip() and not r.startswith("#")]


setup(
    name="qalcosonic",
    description="A decoder for Axioma Qalcosonic E3/E4 (heat/water meter) LoRaWAN uplinks.",
    keywords=["axioma", "qalcosonic", "lorawan", "heat meter", "ttn", "chirpstack"],
    author="Adam Hunter",
    install_requires=_requirements("requirements.txt"),
    extras_require={"test": _requirements("requirements_dev.txt")},
    long_description=LONG_DESCRIPTION,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src", exclude=["tests", "docs"]),
    entry_points={"console_scripts": ["qalcosonic = qalcosonic_cli.client:main"]},
    version=VERSION,
    license="MIT",
    python_requires=">=3.11",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.11",
        "Topic :: Home Automation",
    ],
)
