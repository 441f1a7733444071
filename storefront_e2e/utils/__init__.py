from storefront_e2e.utils.logger import get_logger
from storefront_e2e.utils.timing import measure_response_time

__all__ = ['get_logger', 'measure_response_time']
