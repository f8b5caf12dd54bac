# utils/__init__.py
"""
Utilitários compartilhados: configuração de logging e lock do PyMuPDF.
"""
