from storefront_e2e.api.models import CustomerAccount, CustomerCreateRequest, TokenRequest

__all__ = ['CustomerAccount', 'CustomerCreateRequest', 'TokenRequest']
