from setuptools import setup, find_packages

setup(
    name="window-sort",
    version="0.1.0",
    description="Sort streams within a sliding window using bounded memory",
    author="adamfilli",
    packages=find_packages(include=["windowsort", "windowsort.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
