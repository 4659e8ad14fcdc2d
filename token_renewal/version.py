from importlib.metadata import version

__version__ = version("token-renewal")
