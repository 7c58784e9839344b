from drugcatalog.models.drug import Drug

__all__ = ["Drug"]
