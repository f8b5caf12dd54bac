# middleware/__init__.py
"""
Middlewares HTTP do Laudo Pericial.

- request_id: propaga X-Request-ID e o expõe aos logs
"""
