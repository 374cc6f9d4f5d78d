from contact_book.registry.contact_book import ContactBook

__all__ = ["ContactBook"]
