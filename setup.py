import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("ratnum/version.py", "r") as fh:
    version = fh.read().strip().strip('"')

setuptools.setup(
    name="ratnum",
    version=version,
    description="Exact rational numbers of unbounded size, with Zero, NaN and Undefined as values.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    platforms=['any'],
    python_requires='>=3.8',
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
            # arbitrary precision
            # bignum
            # fractions
    ],
)
