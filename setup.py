"""Setup configuration for the devmatch package."""

from setuptools import find_packages, setup

setup(
    name="devmatch",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "fastapi>=0.110.0",
        "uvicorn>=0.29.0",
        "pydantic>=2.6.4",
        "pydantic-settings>=2.2.1",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "httpx>=0.27.0",
        ],
    },
    python_requires=">=3.9",
    author="devmatch Team",
    description="ICP matching engine ranking developer profiles against target criteria",
)
