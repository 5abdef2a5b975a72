from setuptools import setup, find_packages


# Read README for long description
def read_readme():
    try:
        with open("README.md", "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError:
        return "Aho-Corasick automaton for exact multi-pattern matching"


setup(
    name="ahoc-automaton",
    version="0.1.0",
    description="Aho-Corasick automaton for exact multi-pattern matching",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["ahoc", "ahoc.*"]),
    python_requires=">=3.8",
    install_requires=[
        "pandas>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "numpy",
            "black",
            "flake8",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Text Processing",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    keywords="aho-corasick, automaton, string matching, pattern matching, trie, pandas",
)
