from setuptools import find_packages, setup

setup(
    name="sharutils",
    version="0.1.0",
    description="Shared option parsing engine and front ends for uuencode and uudecode.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="sharutils contributors",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.10",
    install_requires=[
        "rich",
        "python-json-logger>=3.1",
        "pydantic>=2",
        "PyYAML",
        "toml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "uuencode=sharutils.uuencode:main",
            "uudecode=sharutils.uudecode:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
