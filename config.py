# config.py
# -*- coding: utf-8 -*-
"""
Configurações centralizadas do Laudo Pericial
"""

import os
from dotenv import load_dotenv

# Carrega variáveis de ambiente (apenas se existir .env)
load_dotenv()

# ==================================================
# AMBIENTE
# ==================================================
ENV = os.getenv("ENV", "development")
IS_PRODUCTION = ENV == "production"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO" if IS_PRODUCTION else "DEBUG").upper()

SERVICE_NAME = "laudo-pericial"

# Origens liberadas no CORS (separadas por vírgula)
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# ==================================================
# EXTRAÇÃO DE TRECHOS
# ==================================================
# Arquivo JSON opcional com as listas de palavras-chave por perfil
EXCERPT_KEYWORDS_FILE = os.getenv("EXCERPT_KEYWORDS_FILE") or None

# ==================================================
# CONFIGURAÇÕES DE ARQUIVOS
# ==================================================
MAX_UPLOAD_SIZE = int(os.getenv("MAX_UPLOAD_SIZE", str(20 * 1024 * 1024)))  # 20MB
