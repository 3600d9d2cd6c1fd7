from setuptools import setup, find_packages

setup(
    name="sudoku-engine",
    version="1.0.0",
    description="Sudoku generation, backtracking solver and solution checking",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.24.0",
        "tqdm>=4.65.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "sudoku-engine=sudoku_engine.console:main",
        ]
    },
)
