# setup.py
from setuptools import setup, find_packages

setup(
    name="openapi-map",
    version="0.1.0",
    description="Build navigable documentation trees from OpenAPI-like type registries",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "Markdown",  # default markdown-to-HTML renderer
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'openapi-map=openapi_map.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
