# logitrack/__init__.py

"""
LogiTrack: gestão de clientes, corridas e finanças de uma empresa de motoboys.
"""

__version__ = "1.0.0"
