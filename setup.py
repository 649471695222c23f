from setuptools import setup, find_packages

setup(
    name="fasty_transcript",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "requests>=2.31.0",
        "urllib3>=1.26.0",
        "colorlog>=6.7.0",
        "python-dotenv>=1.0.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "fasty-transcript=fasty_transcript.cli:main",
        ],
    },
    python_requires=">=3.9",
    description="Fetch YouTube transcripts through an ordered fallback of retrieval strategies",
    author="Venkatesh Murugadas",
)
