from setuptools import setup, find_packages

setup(
    name="euler_grid",
    version="0.1.0",
    packages=find_packages(include=["euler_grid", "euler_grid.*"]),
    package_data={"euler_grid": ["configs/*.yaml", "resources/*.txt"]},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
