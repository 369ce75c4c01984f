from pathlib import Path
import re

from setuptools import find_packages, setup

ROOT = Path(__file__).parent


def _read_version() -> str:
    init = (ROOT / "src" / "uwuify" / "__init__.py").read_text(encoding="utf-8")
    match = re.search(r"^__version__ = ['\"]([^'\"]+)['\"]", init, re.M)
    if not match:
        raise RuntimeError("Unable to find __version__ in src/uwuify/__init__.py")
    return match.group(1)


setup(
    name="uwuify",
    version=_read_version(),
    description="Case-preserving uwu text transformer",
    author="GAHEOS",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["uwuify = uwuify.cli:main"]},
)
