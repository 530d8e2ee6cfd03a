__title__ = "httpy"
__description__ = "A small command-line HTTP client for JSON APIs."
__version__ = "1.0.0"
