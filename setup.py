from statsdsend import __version__
from setuptools import find_packages, setup

import os


setup(
    name="statsdsend",
    version=os.getenv("VERSION") or __version__,
    zip_safe=False,
    packages=find_packages(exclude=["test"]),
    extras_require={
        "test": [
            "pytest",
        ],
    },
    install_requires=[],
    dependency_links=[],
    package_data={},
    data_files=[],
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: System :: Monitoring",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
