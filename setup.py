import os
from setuptools import setup, find_packages

# Read version from _version.py (exec, not import: the package isn't installed yet)
version_file = os.path.join(os.path.dirname(__file__), "src", "branchver", "_version.py")
with open(version_file, encoding="utf-8") as f:
    exec(f.read())

setup(
    name="branchver",
    version=get_pip_version() if "get_pip_version" in locals() else "0.0.0",
    description="NuGet and SemVer 2.0.0 version strings from source-control branch names",
    author="Dustin",
    author_email="6962246+djdarcy@users.noreply.github.com",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    entry_points={
        "console_scripts": [
            "branchver=branchver.cli:main",
        ],
    },
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0", "pytest-cov>=4.0"],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Build Tools",
    ],
    python_requires=">=3.10",
)
