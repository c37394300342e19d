"""Setup script for name_ml package."""
from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="name-ml",
    version="0.1.0",
    author="Stuart",
    description="A grammar-based classifier and parser for person, company and abbreviation names",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*", "scripts", "examples"]),
    python_requires=">=3.11",
    install_requires=[
        "pyyaml>=5.4",
        "pandas>=1.3.0",
        "joblib>=1.3.0",
    ],
    extras_require={
        "eval": [
            "scikit-learn>=1.3.0",
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "black>=22.0.0",
            "flake8>=4.0.0",
        ],
    },
    package_data={
        "name_ml": ["data/*.yaml", "data/lexicon/*"],
    },
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Text Processing :: Linguistic",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
