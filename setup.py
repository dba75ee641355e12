# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="dirsim",
    version="1.0.0",
    description="In-memory hierarchical namespace simulator with a batch command driver",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["dirsim*"]),
    package_data={"dirsim.interface": ["locales/*.json"]},
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'dirsim=dirsim.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
