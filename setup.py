from setuptools import setup

setup(
    name="adjlist",
    version="0.1.0",
    description="Adjacency-list graphs with a plain-text listing format",
    license="MIT",
    packages=["adjlist"],
    python_requires=">=3.9",
    install_requires=["PyYAML>=5.1"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["adjlist = adjlist.cli:main"]},
)
