from setuptools import setup, find_packages

setup(
    name="typeahead",
    version="0.1.0",
    description="Typeahead — text editor core with trie autocomplete and undo/redo",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "PyQt5",
        "pyspellchecker",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "typeahead=typeahead.main:main",
        ],
    },
)
