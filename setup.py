from collections import defaultdict
from pathlib import Path

from setuptools import find_packages, setup

setup_path = Path(__file__).parent

# Include demos in a separate directory in the distribution as data_files.
demo_parent_path = Path("share/multidimgrid/demos")
data_files = defaultdict(list)
demos_source = setup_path / "demos"
for item in demos_source.rglob("*"):
    if item.is_file():
        install_dir = demo_parent_path / item.parent.relative_to(demos_source)
        data_files[str(install_dir)].append(str(item.relative_to(setup_path)))
data_files = list(data_files.items())

with open(setup_path / "README.md") as f:
    long_description = f.read()

setup(
    name="multidimgrid",
    version="0.1.0",
    description="Discrete functions on multi-dimensional grids with arbitrarily spaced axes",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages("src"),
    data_files=data_files,
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "matplotlib",
        "typing_extensions; python_version < '3.12'",
    ],
    extras_require={
        "test": ["pytest"],
        "docs": ["sphinx", "sphinx-immaterial"],
    },
)
