""" keyfamily build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import keyfamily

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=keyfamily.name,
    version=keyfamily.__version__,
    license=keyfamily.__license__,
    author=keyfamily.__author__,
    author_email=keyfamily.__author_email__,
    description="Deterministic secp256k1 key families from a 128-bit seed",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["btclib>=2023.2.20,<2024", "dataclasses_json"],
    extras_require={
        "secp256k1": ["btclib_libsecp256k1"],
        "test": ["pytest"],
    },
    keywords=(
        "bitcoin ripple cryptography elliptic-curves secp256k1 "
        "deterministic-keys key-derivation watch-only"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
