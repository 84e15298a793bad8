from setuptools import setup, find_packages

setup(
    name="xplit",
    version="1.0.0",
    description="2-of-2 XOR secret sharing. Two shares, both required, each CRC32-checked.",
    long_description=open("README.md").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["cli"],
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "web": ["aiohttp>=3.9.0"],
        "test": ["pytest>=7.0", "aiohttp>=3.9.0"],
    },
    entry_points={
        "console_scripts": [
            "xplit=cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Security",
    ],
    license="MIT",
)
