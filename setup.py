from re import search
from setuptools import setup, find_packages

with open("src/reactive_graphql/version.py") as version_file:
    version = search('version = "(.*)"', version_file.read()).group(1)

with open("README.md") as readme_file:
    readme = readme_file.read()

setup(
    name="reactive-graphql",
    version=version,
    description="Reactive execution of GraphQL operations for Python,"
    " producing a stream of results that is updated whenever the data changes.",
    long_description=readme,
    long_description_content_type="text/markdown",
    keywords="graphql reactive rx observable",
    license="MIT license",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
    ],
    install_requires=["graphql-core>=3.2,<3.3", "reactivex>=4.0,<5"],
    extras_require={
        "test": ["pytest>=7", "pytest-asyncio>=0.21", "pytest-describe>=2"],
    },
    python_requires=">=3.9,<4",
    packages=find_packages("src"),
    package_dir={"": "src"},
    # PEP-561: https://www.python.org/dev/peps/pep-0561/
    package_data={"reactive_graphql": ["py.typed"]},
    include_package_data=True,
    zip_safe=False,
)
