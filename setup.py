import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="calcnum",
    version="0.1.0",
    description="Small numerical analysis toolkit: fitting, quadrature, "
                "ODE stepping and scalar equation solvers.",
    install_requires=[
        'numpy'
    ],
    extras_require={
        'test': ['pytest'],
        'doc': ['sphinx', 'pydata-sphinx-theme'],
    },
    keywords='numerical analysis root finding quadrature',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['calcnum', 'calcnum.*']),
    python_requires='>=3.10',
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Mathematics"
    ]
)
