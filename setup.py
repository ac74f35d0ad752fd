from setuptools import setup, find_packages

setup(
    name="mathmodel",
    version="0.1",
    description="Generic exact and inexact algebra: rational numbers, vectors and matrices",
    long_description=("Generic algebra package offering exact rational arithmetic with promotion to real and "
                      "complex kinds, and vectors and matrices that work over any number kind"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["mathmodel", "mathmodel.*"]),
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["rational numbers", "exact arithmetic", "matrix", "linear algebra"],
    zip_safe=False,
)
