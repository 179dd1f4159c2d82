from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

version = {}
with open("pathfind/_version.py", "r", encoding="utf-8") as fh:
    exec(fh.read(), version)

setup(
    name="pathfind",
    version=version["__version__"],
    description="Uniform-cost path, area and range queries over caller-defined graphs.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    install_requires=["networkx"],
    extras_require={"dev": ["pytest", "networkx"]},
    tests_require=["pytest", "networkx"],
)
