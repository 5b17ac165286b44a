import sys
from setuptools import setup, find_packages

# Check for minimum Python version (tomllib ships with 3.11)
if sys.version_info < (3, 11):
    sys.exit("Sorry, Python >= 3.11 is required for tensorshape.")

# Read README for long description
try:
    with open("README.md", encoding="utf-8") as f:
        long_description = f.read()
except FileNotFoundError:
    long_description = "tensorshape: shape and rank bookkeeping for nested numeric arrays."


setup(
    name="tensorshape",
    version="0.1.0",  # Keep in sync with tensorshape.__version__ fallback
    description="Shape inference, rank conversion and row-major iteration for nested arrays",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    # Define the Python package structure
    packages=find_packages(),  # Finds 'tensorshape' and its 'utils' subpackage
    # numpy arrays are accepted wherever nested data is
    install_requires=["numpy>=1.16"],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "tensorshape=tensorshape.__main__:main",
        ],
    },
    zip_safe=False,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.11",
)
