from setuptools import setup

__version__ = "1.0.0"

setup(
    name="vininfo",
    version=__version__,
    packages=[
        "vininfo",
        "vininfo.data",
        "vininfo.providers",
        "vininfo.util",
    ],
    python_requires=">=3.10",
    install_requires=[
        "requests",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    license="",
    author="",
    author_email="",
    description="VIN decoding, validation and NHTSA vPIC lookups",
)
