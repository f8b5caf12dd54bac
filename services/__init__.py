# services/__init__.py
"""
Serviços do Laudo Pericial

- excerpt_extractor: extração de trechos por tipo (insalubridade, periculosidade, acidentário)
- document_text: conversão de PDF/DOCX/TXT em texto
- quesitos: extração de quesitos numerados
"""
