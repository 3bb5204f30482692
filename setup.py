import re
from os.path import dirname, join, realpath
from setuptools import find_packages, setup


def _read_version():
    init_path = join(dirname(realpath(__file__)), "src", "molcodec", "__init__.py")
    with open(init_path, "r") as file:
        match = re.search(r'^__version__ = "(.+)"$', file.read(), re.MULTILINE)
    if match is None:
        raise RuntimeError("Cannot find version string in 'molcodec/__init__.py'")
    return match.group(1)


setup(
    name="molcodec",
    version=_read_version(),
    description="Reading and writing MDL Molfiles (V2000) with continuous bond orders",
    license="BSD-3-Clause",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"molcodec": ["elements.json"]},
    python_requires=">=3.10",
    install_requires=["numpy >= 1.25"],
    extras_require={"test": ["pytest >= 7.0"]},
)
