# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="docnav",
    version="1.0.0",
    description="Builds a navigation tree and URL index from a directory of markdown files",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["docnav", "docnav.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        'console_scripts': [
            'docnav=docnav.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
