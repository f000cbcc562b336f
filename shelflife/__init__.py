"""Extract purchase dates, food items, categories and expiry estimates from Japanese receipt OCR text."""

__version__ = "0.1.0"
