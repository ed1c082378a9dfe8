__version__ = '1.0.0'
version = __version__
