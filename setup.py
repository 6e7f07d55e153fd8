""" adaptorsig build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import adaptorsig

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=adaptorsig.name,
    version=adaptorsig.__version__,
    license=adaptorsig.__license__,
    author=adaptorsig.__author__,
    author_email=adaptorsig.__author_email__,
    description="BIP340-Schnorr signature and adaptor signature verification",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    # install_requires=[],
    extras_require={
        "secp256k1": ["btclib_libsecp256k1"],
        "test": ["pytest"],
        "docs": ["sphinx", "sphinx_rtd_theme", "myst_parser"],
    },
    keywords=(
        "bitcoin cryptography elliptic-curves schnorr bip340 "
        "adaptor-signatures secp256k1"
    ),
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Scientific/Engineering",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
