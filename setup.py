from setuptools import find_packages, setup

setup(
    name="esbridge",
    version="0.3.0",
    description="Target resource parsing and endpoint paths for search backend connectors",
    packages=find_packages(include=["esbridge", "esbridge.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.0",
        "pyyaml",
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
