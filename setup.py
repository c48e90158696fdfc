"""
Discord OAuth2 Provider

Discord endpoints, user mapping, error mapping and token revocation
(RFC 7009) on top of an httpx-based OAuth2 client.
"""

from setuptools import setup, find_packages

setup(
    name="discord-oauth2-provider",
    version="1.0.0",
    description="Discord OAuth2 provider with token revocation support",
    author="FaultMaven",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.11",
    install_requires=[
        # HTTP transport
        "httpx>=0.25.0",

        # Models and configuration
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
        ],
        "dev": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.1.0",
            "black>=23.10.0",
            "flake8>=6.1.0",
            "mypy>=1.7.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3.11",
        "License :: Other/Proprietary License",
    ],
)
