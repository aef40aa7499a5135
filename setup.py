from setuptools import find_packages, setup

setup(
    name="semcat",
    version="0.1.0",
    description="Classify free text against described categories by embedding similarity",
    packages=find_packages(include=["semcat", "semcat.*"]),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "semcat=semcat.cli:main",
        ],
    },
)
