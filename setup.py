from setuptools import find_packages, setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name="stacktrace",
    version="0.3",
    author="Patrick Walton",
    author_email="patrick@careweather.com",
    description="Annotated error chains with line numbers and error codes",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/careweather/stacktrace",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.11",
    install_requires=[
        "beautifultable>=1.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX :: Linux",
    ],
)
