# setup.py

from setuptools import setup, find_packages

if __name__ == "__main__":
    setup(
        name='lightdash',
        version='0.1.0',  # Keep in sync with lightdash.__version__
        description='Type predicates, deep collection helpers and path accessors for plain Python data',
        packages=find_packages(include=["lightdash", "lightdash.*"]),  # Restrict to lightdash and its subpackages
        include_package_data=True,
        package_data={"lightdash": ["grammar.lark"]},  # The path grammar is loaded at runtime
        install_requires=[
            "lark>=1.1",
            "numpy",
        ],
        extras_require={
            "test": ["pytest"],
        },
        python_requires=">=3.8",
    )
