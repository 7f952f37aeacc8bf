"""rc5lab: the RC5 block cipher with its evaluation tooling.

Research / education only. Do NOT use in production.
"""

__version__ = "0.3.0"
