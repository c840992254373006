import copy
import json

import pytest

from portfolio.catalog import get_template, theme_from_template
from portfolio.storage import MemoryStorage

SAMPLE_PORTFOLIO = {
    'id': '66f1c0ffee0000000000abcd',
    'title': 'Jane Doe',
    'description': 'Backend engineer',
    'theme': theme_from_template(get_template('modern-professional')),
    'sections': [
        {
            'id': 'hero-1', 'type': 'hero', 'title': 'Hero', 'order': 0, 'isVisible': True, 'settings': {},
            'content': {'name': 'Jane Doe', 'title': 'Backend Engineer', 'description': '  Builds APIs  ',
                        'avatar': 'https://cdn.example.com/avatar.png'},
        },
        {
            'id': 'about-1', 'type': 'about', 'title': 'About', 'order': 1, 'isVisible': True, 'settings': {},
            'content': {'bio': '  Ten years of building services.  '},
        },
        {
            'id': 'skills-1', 'type': 'skills', 'title': 'Skills', 'order': 2, 'isVisible': True, 'settings': {},
            'content': {'items': [
                {'name': 'Python', 'category': 'technical', 'proficiency': 'expert'},
                {'name': 'Go', 'category': 'technical', 'proficiency': 'advanced'},
                {'name': 'Mentoring'},
            ]},
        },
        {
            'id': 'projects-1', 'type': 'projects', 'title': 'Projects', 'order': 3, 'isVisible': True, 'settings': {},
            'content': {'items': [
                {'title': 'Ledger', 'description': ' Double-entry accounting service ',
                 'technologies': ['Python', 'Postgres'], 'image': 'https://cdn.example.com/ledger.jpg'},
            ]},
        },
        {
            'id': 'contact-1', 'type': 'contact', 'title': 'Contact', 'order': 4, 'isVisible': True, 'settings': {},
            'content': {'email': 'jane@example.com', 'location': 'Berlin'},
        },
        {
            'id': 'custom-1', 'type': 'custom', 'title': 'Hidden', 'order': 5, 'isVisible': False, 'settings': {},
            'content': {},
        },
    ],
    'settings': {
        'isPublic': True,
        'seoTitle': 'Jane Doe | Backend Engineer',
        'seoDescription': 'Portfolio of Jane Doe',
        'seoKeywords': ['python', 'backend'],
        'socialLinks': [{'platform': 'github', 'url': 'https://github.com/jane', 'isVisible': True}],
        'analytics': {'googleAnalyticsId': 'G-123'},
    },
    'createdAt': '2024-01-01T00:00:00.000Z',
    'updatedAt': '2024-01-01T00:00:00.000Z',
}


@pytest.fixture
def portfolio():
    return copy.deepcopy(SAMPLE_PORTFOLIO)


@pytest.fixture
def backend():
    return MemoryStorage()


@pytest.fixture
def post_json(client):
    def post(url, data=None, method='post'):
        return getattr(client, method)(url, data=json.dumps(data or {}), content_type='application/json')
    return post


@pytest.fixture
def saved_portfolio(post_json, portfolio):
    response = post_json('/api/portfolios/', portfolio)
    assert response.status_code == 201
    return response.json()['portfolio']
