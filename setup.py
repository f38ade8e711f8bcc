#!/usr/bin/env python
import os
import re

from setuptools import find_packages, setup


def get_version():
    path = os.path.join(os.path.dirname(__file__), "src", "blendah", "version.py")
    with open(path) as f:
        match = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.M)
    if match is None:
        raise RuntimeError("Unable to find __version__ in %s" % path)
    return match.group(1)


setup(
    name="blendah",
    version=get_version(),
    description="Blend stacks of RGBA raster layers with classic blend modes",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "attrs>=23.1.0",
        "numpy",
        "Pillow>=10.0.0",
        "typing_extensions; python_version < '3.11'",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "blendah = blendah.__main__:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Topic :: Multimedia :: Graphics",
    ],
)
