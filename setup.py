from setuptools import setup, find_packages

setup(
    name="human_name_parser",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "human-name-parser=human_name_parser.cli.main:main",
        ],
    },
    python_requires=">=3.9",
)
