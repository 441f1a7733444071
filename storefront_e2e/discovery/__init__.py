from storefront_e2e.discovery.product_finder import ProductFinder

__all__ = ['ProductFinder']
