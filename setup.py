# setup.py
from setuptools import find_packages, setup

setup(
    name="espressoapi",
    version="0.1.0",
    packages=find_packages(include=["espressoapi", "espressoapi.*"]),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn>=0.29",
        "sqlalchemy[asyncio]>=2.0",
        "PyMySQL>=1.1",
        "asyncpg>=0.29",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "structlog>=24.1",
        "sentry-sdk>=1.40",
    ],
    extras_require={
        "mysql": ["aiomysql>=0.2"],
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
            "httpx>=0.27",
            "aiosqlite>=0.20",
        ],
    },
    entry_points={"console_scripts": ["espressoapi=espressoapi.main:run"]},
)
