import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="named-invoker",
    version="0.0.0",
    author="Zetta AI",
    author_email="",
    description="Invoke methods and callables with named parameters",
    long_description=long_description,
    long_description_content_type="text/markdown",
    include_package_data=True,
    install_requires=[
        "attrs",
        "typeguard>=4",
        "rich",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
        ],
    },
    packages=setuptools.find_packages(include=["named_invoker", "named_invoker.*"]),
    python_requires=">=3.10",
)
