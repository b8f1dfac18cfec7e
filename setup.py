from setuptools import setup


setup_options = dict(
    name="adcpnav",
    version="0.1",
    description="Distance traveled and dead reckoning from ADCP ensembles",
    license="MIT",
    packages=["adcpnav"],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.8",
    install_requires=["numpy", "pandas"],
    extras_require={
        "test": ["pytest"],
        "plot": ["matplotlib"],
    },
)

setup(**setup_options)
