from setuptools import setup


def readme():
    with open("README.md") as f:
        return f.read()


setup(
    name="dicontainer",
    version="1.0.0",
    description=(
        "Dependency injection container for Python 3, with lifetimes, "
        "multiple bindings and open generics"
    ),
    long_description=readme(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Operating System :: OS Independent",
    ],
    keywords="dependency injection container type hints generics",
    license="MIT",
    packages=["dicontainer"],
    python_requires=">=3.8",
    install_requires=[],
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    zip_safe=False,
)
