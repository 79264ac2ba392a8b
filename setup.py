import setuptools

setuptools.setup(
    name="undoredo",
    version="1.0.0",
    description="Generic undo/redo command history with transactions and a bounded size",
    license="GPL-3.0-or-later",
    packages=setuptools.find_packages(include=["undoredo", "undoredo.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pypubsub>=4.0",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
        ],
    },
    entry_points={
        "console_scripts": [
            "undoredo=undoredo.app:main",
        ],
    },
)
