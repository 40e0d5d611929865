from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import ModuleType

from setuptools import find_packages, setup


loader = SourceFileLoader("slidez", "./src/slidez/__init__.py")
slidez = ModuleType(loader.name)
loader.exec_module(slidez)

setup(
    name="slidez",
    version=slidez.__version__,  # type: ignore
    description="Markdown-like slide decks rendered to typed blocks.",
    long_description=(Path(__file__).parent / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    python_requires=">=3.12",
    package_dir={"": "src"},
    packages=find_packages("src", exclude=["tests"]),
    package_data={"slidez": ["templates/*.jinja"]},
    entry_points={"console_scripts": ["slidez=slidez.cli:main"]},
    install_requires=[
        "appdirs",
        "cyclopts",
        "Jinja2",
        "MarkupSafe",
        "pydantic>=2",
        "PyYAML",
        "rich",
        "watchfiles",
    ],
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.12",
    ],
)
