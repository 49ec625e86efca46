import os

from setuptools import setup

here = os.path.dirname(os.path.abspath(__file__))
version_ns = {}
with open(os.path.join(here, "geostruct", "_version.py")) as f:
    exec(f.read(), version_ns)

setup(
    name="geostruct",
    version=version_ns["__version__"],
    description="Build and serialize GeoJSON (RFC 7946) objects",
    license="BSD",
    packages=["geostruct"],
    package_data={"geostruct": ["py.typed"]},
    python_requires=">=3.9",
    install_requires=["msgspec>=0.19"],
    extras_require={"test": ["pytest"]},
)
