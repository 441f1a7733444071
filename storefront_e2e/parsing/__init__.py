from storefront_e2e.parsing.html_extractor import StorefrontPage, is_valid_price

__all__ = ['StorefrontPage', 'is_valid_price']
