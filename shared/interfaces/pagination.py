"""
Pagination classes.
"""
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class StandardPagination(PageNumberPagination):
    """
    Page-number pagination that reports the page position instead of links.

    Response shape: ``{'results', 'page', 'pages', 'count'}``.
    """
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100

    def get_paginated_response(self, data):
        return Response({
            'results': data,
            'page': self.page.number,
            'pages': self.page.paginator.num_pages,
            'count': self.page.paginator.count,
        })

    def get_paginated_response_schema(self, schema):
        return {
            'type': 'object',
            'required': ['results', 'page', 'pages', 'count'],
            'properties': {
                'results': schema,
                'page': {'type': 'integer', 'example': 1},
                'pages': {'type': 'integer', 'example': 3},
                'count': {'type': 'integer', 'example': 42},
            },
        }
