from setuptools import setup, find_packages

setup(
    name="npsearch",
    version="0.1.0",
    description="npsearch: search npm from the terminal, then open or install a result",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=["rich", "requests"],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "npsearch=npsearch.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
