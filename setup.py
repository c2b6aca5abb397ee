from setuptools import setup

with open("./README.md") as f:
    long_description = f.read()

setup(
    name="ordered-bst",
    description=("An ordered symbol table backed by a binary search tree"
                 + " with order statistics"),
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=['ordered_bst'],
    version='0.1',
    python_requires=">=3.7",
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: MIT License",
    ])
