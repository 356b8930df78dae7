from pathlib import Path
from setuptools import find_namespace_packages, setup

README = Path(__file__).parent / "README.md"

setup(
    name="printfiles",
    version="0.3.0",
    description="Print files matched by globs/dirs wrapped in diff-friendly dividers",
    long_description=README.read_text(encoding="utf-8") if README.exists() else "",
    long_description_content_type="text/markdown",
    author="GAHEOS",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["printfiles", "printfiles.*"]),
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["printfiles = printfiles.cli:main"]},
)
