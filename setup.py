from setuptools import setup, find_packages
from pathlib import Path

this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()

install_requires = [
    "pydantic >= 2, < 3",
    "click >= 8, < 9",
    "rich-click >= 1.6.0, < 2",
    "rich >= 10.16",
]

extras_require = dict(
    tests=[
        "pytest >= 7, < 9",
    ],
    dev=[
        "black",
        "isort >= 5.10.0, < 6",
    ],
)

setup(
    name="dotstore",
    description="Key/value configuration store keeping each value in its own file under local and global dot-directories.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="dotstore developers",
    version="0.1.0",
    packages=find_packages(exclude=("tests",)),
    keywords=[
        "config",
        "configuration",
        "key-value",
        "dotfiles",
        "cli",
    ],
    python_requires=">=3.8",
    install_requires=install_requires,
    extras_require=extras_require,
    license="ISC",
    entry_points=dict(
        console_scripts=[
            "dotstore=dotstore.cli.__main__:main",
        ]
    ),
)
