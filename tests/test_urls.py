"""
Tests for URL template filling.
"""

import pytest

from quandlkit.client.urls import (
    OperationKind,
    URL_TEMPLATES,
    build_url,
    template_arity,
)


BASE = 'https://www.quandl.com'


class TestTemplates:
    """Test the template table."""

    def test_every_kind_has_template(self):
        for kind in OperationKind:
            assert kind in URL_TEMPLATES

    @pytest.mark.parametrize('kind, arity', [
        (OperationKind.DIRECT, 3),
        (OperationKind.SYMBOL, 3),
        (OperationKind.SEARCH, 2),
        (OperationKind.LIST, 2),
        (OperationKind.META, 2),
        (OperationKind.DATABASES, 2),
        (OperationKind.BULK, 2),
    ])
    def test_arity(self, kind, arity):
        assert template_arity(kind) == arity


class TestBuildUrl:
    """Test build_url()."""

    def test_symbol_url(self):
        url = build_url(OperationKind.SYMBOL, 'WIKI/AAPL', 'json', 'auth_token=abc123')
        assert url == f'{BASE}/api/v3/datasets/WIKI/AAPL.json?auth_token=abc123'

    def test_direct_url(self):
        url = build_url(OperationKind.DIRECT, 'datasets/WIKI/AAPL/data', 'json', 'limit=1')
        assert url == f'{BASE}/api/v3/datasets/WIKI/AAPL/data.json?limit=1'

    def test_meta_url_has_no_query(self):
        url = build_url(OperationKind.META, 'WIKI/AAPL', 'json')
        assert url == f'{BASE}/api/v3/datasets/WIKI/AAPL/metadata.json'

    def test_databases_url(self):
        url = build_url(OperationKind.DATABASES, 'json', 'page=1&per_page=100')
        assert url == f'{BASE}/api/v3/databases.json?page=1&per_page=100'

    def test_bulk_url(self):
        url = build_url(OperationKind.BULK, 'WIKI', 'download_type=partial')
        assert url == f'{BASE}/api/v3/databases/WIKI/data?download_type=partial'

    def test_kind_given_as_string(self):
        url = build_url('search', 'json', 'query=oil')
        assert url == f'{BASE}/api/v3/datasets.json?query=oil'

    def test_empty_query_strips_question_mark(self):
        url = build_url(OperationKind.SYMBOL, 'WIKI/AAPL', 'json', '')
        assert url == f'{BASE}/api/v3/datasets/WIKI/AAPL.json'

    def test_trailing_ampersand_stripped(self):
        url = build_url(OperationKind.SEARCH, 'json', 'query=oil&')
        assert url == f'{BASE}/api/v3/datasets.json?query=oil'

    @pytest.mark.parametrize('kind', list(OperationKind))
    @pytest.mark.parametrize('query', ['', '&', 'a=1&', '?&'])
    def test_never_ends_with_separator(self, kind, query):
        args = ['x'] * (template_arity(kind) - 1) + [query]
        url = build_url(kind, *args)
        assert not url.endswith('?')
        assert not url.endswith('&')

    def test_custom_base_url(self):
        url = build_url(OperationKind.META, 'WIKI/AAPL', 'json', base_url='http://localhost:8080/')
        assert url == 'http://localhost:8080/api/v3/datasets/WIKI/AAPL/metadata.json'

    def test_too_few_arguments(self):
        with pytest.raises(TypeError, match="takes 3 arguments, got 2"):
            build_url(OperationKind.SYMBOL, 'WIKI/AAPL', 'json')

    def test_too_many_arguments(self):
        with pytest.raises(TypeError, match="takes 2 arguments, got 3"):
            build_url(OperationKind.META, 'WIKI/AAPL', 'json', 'auth_token=abc')

    def test_non_string_argument(self):
        with pytest.raises(TypeError, match="must be str"):
            build_url(OperationKind.DATABASES, 'json', 5)

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            build_url('nope', 'json')
