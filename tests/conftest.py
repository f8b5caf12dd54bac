# tests/conftest.py
"""
Configuração global do pytest para o Laudo Pericial.

Este arquivo é executado automaticamente pelo pytest antes dos testes.
"""

import sys
import os

# Adiciona o diretório raiz do projeto ao PYTHONPATH
# para que os imports funcionem corretamente nos testes
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

# Configura variáveis de ambiente para testes
os.environ.setdefault("ENV", "test")


import pytest


@pytest.fixture
def client():
    """Cliente HTTP da aplicação (sem executar o lifespan)."""
    from fastapi.testclient import TestClient
    from main import app
    return TestClient(app)


@pytest.fixture
def paragrafo_insalubridade():
    """Parágrafo típico de petição inicial sobre insalubridade."""
    return (
        "O trabalhador estava exposto a ruído contínuo acima do limite de "
        "tolerância da NR-15, configurando insalubridade."
    )


@pytest.fixture
def paragrafo_periculosidade():
    """Parágrafo típico de petição inicial sobre periculosidade."""
    return (
        "O reclamante abastecia veículos com líquidos inflamáveis diariamente, "
        "em área de risco definida pela NR-16."
    )
