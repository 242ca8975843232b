from setuptools import setup, find_packages

setup(
    name="tutorhub",
    version="0.1",
    packages=find_packages(exclude=["tests", "tests.*", "alembic", "alembic.*"]),
    install_requires=[
        "fastapi",
        "uvicorn",
        "sqlalchemy",
        "psycopg2-binary",
        "python-jose[cryptography]",
        "passlib[bcrypt]",
        "bcrypt<5",  # passlib 1.7 breaks on bcrypt 5's 72-byte check
        "pydantic[email]",
        "pydantic-settings",
        "python-dotenv",
        "alembic",
        "requests",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
)
