from setuptools import setup
from pathlib import Path

this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="typingbench",
    version="0.1.0",
    description="Latency benchmark that simulates human typing against a text-checking API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=["typingbench", "typingbench.keyboard", "typingbench.checker"],
    install_requires=[
        "httpx",
    ],
    extras_require={
        "test": [
            "pytest",
            "respx",
        ],
    },
    entry_points={
        "console_scripts": [
            "typingbench=typingbench.__main__:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
)
