"""Modelos y entidades del dominio.

Por qué:
- Aquí viven estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce la CLI ni el render: solo conceptos de movimiento.
"""
