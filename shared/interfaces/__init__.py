from .exception_handlers import custom_exception_handler
from .pagination import StandardPagination

__all__ = ['custom_exception_handler', 'StandardPagination']
