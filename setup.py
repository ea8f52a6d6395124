"""Setup configuration for Video Review Analyzer."""

from setuptools import setup, find_packages

setup(
    name="video-review-analyzer",
    version="0.1.0",
    description="Quality scoring for video reviews from vision annotations and AI critiques",
    author="Video Review Analyzer Team",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "anthropic>=0.18.0",
        "rich>=13.0.0",
        "typer>=0.9.0",
        "pyyaml>=6.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "httpx>=0.23.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "review-analyzer=review_analyzer.ui.cli:main",
        ],
    },
)
