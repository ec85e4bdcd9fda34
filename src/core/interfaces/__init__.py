"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que los adapters concretos implementan.
- Invierte dependencias: el driver de animación depende de abstracciones.
"""
