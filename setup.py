"""
Setup script para instalação do projeto Laudo Pericial.

Este arquivo permite instalar o projeto em modo editable para desenvolvimento:
    pip install -e ".[test]"

Isso adiciona o projeto ao PYTHONPATH e permite imports como:
    from services.excerpt_extractor import excerpt_extractor
"""

from setuptools import setup, find_packages

setup(
    name="laudo-pericial",
    version="1.0.0",
    description="Laudo Pericial - extração de trechos e quesitos para laudos NR-15/NR-16",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["config", "main"],
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.110",
        "uvicorn>=0.27",
        "pydantic>=2.5",
        "python-dotenv>=1.0",
        "python-multipart>=0.0.9",
        "structlog>=24.1",
        "PyMuPDF>=1.23",
        "python-docx>=1.1",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "httpx>=0.27",
        ],
    },
)
