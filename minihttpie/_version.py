__title__ = "minihttpie"
__description__ = "A small HTTPie-style command line HTTP client."
__version__ = "1.0.0"
