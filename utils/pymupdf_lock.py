# utils/pymupdf_lock.py
"""
Serializa o acesso ao MuPDF.

A conversão de uploads roda no threadpool do FastAPI (run_in_threadpool) e o
MuPDF não aceita chamadas concorrentes: abrir, ler e fechar o documento
acontece dentro de `with pymupdf_lock:` (ver services/document_text/converter.py).
"""

import threading

pymupdf_lock = threading.Lock()
