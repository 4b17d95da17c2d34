from setuptools import setup, find_packages

setup(
    name="ourairports-api",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "ourairports_api.web": ["static/*"],
    },
    install_requires=[
        "requests>=2.25.1",
        "pandas>=1.2.0",
        "fastapi>=0.100.0",
        "uvicorn>=0.20.0",
        "pydantic>=2.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "httpx>=0.24.0",
            "black>=21.0",
            "mypy>=0.900",
            "flake8>=3.9.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "ourairports-api=ourairports_api.cli:main",
        ],
    },
    description="Typed access to the OurAirports datasets and a read-only JSON API over them",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
)
