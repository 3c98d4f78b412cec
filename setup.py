from setuptools import find_packages, setup

setup(
    name="krokiprep",
    version="0.3.0",
    description="Resolve PlantUML includes and inline Vega-Lite data before rendering with Kroki",
    author="GAHEOS",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=["json5>=0.9"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["krokiprep = krokiprep.cli:main"]},
)
