import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="smallweb",
    version="0.0.0",
    author="Maarten Jacobs",
    author_email="maarten.j.jacobs@gmail.com",
    description="Parsers for Gemini, Gopher and Finger responses",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    extras_require={"test": ["pytest", "hypothesis"]},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Utilities",
        "Topic :: Internet",
        "Topic :: Text Processing :: Markup",
    ],
    python_requires="~=3.7",  # Python >= 3.7 but < 4
    keywords=["gemini", "gopher", "finger", "gemtext", "smallweb"],
)
