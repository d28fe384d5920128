from setuptools import setup, find_packages

setup(
    name="ofx-import",
    version="0.1.0",
    description="OFX/QFX bank statement import parser",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2.0.0",
    ],
    extras_require={
        "dev": [
            "mypy>=1.0.0",
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "isort>=5.0.0",
            "flake8>=6.0.0"
        ]
    },
    entry_points={
        "console_scripts": [
            "ofx-import=ofx_import.cli:main",
        ]
    },
    python_requires=">=3.8",
)
