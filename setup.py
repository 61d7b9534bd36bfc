from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="TreeSelect",
    version="0.1.0",
    author="Alex Prochot",
    description="State engine for hierarchical checkbox trees: cascading selection, partial state, search and tags",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Intended Audience :: Developers",
    ],
    python_requires=">=3.11",
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "treeselect=TreeSelect.main:main",
        ],
    },
)
