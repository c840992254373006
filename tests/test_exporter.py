import json

import pytest

from portfolio.catalog import get_template
from portfolio.exceptions import UnsupportedExportFormat
from portfolio.exporter import INTER_FONT_URL, export_filename, prepare_export


@pytest.fixture
def template():
    return get_template('modern-professional')


def test_filename_slug():
    assert export_filename({'title': "Jane's Portfolio 2024"}, 'html') == 'jane_s_portfolio_2024_portfolio.html'


def test_html_export(portfolio, template):
    data = prepare_export(portfolio, template, 'html')

    assert data['format'] == 'html'
    assert data['htmlUrl'] == f"/api/preview/{portfolio['id']}?template=modern-professional"
    assert data['assets'] == [
        {'type': 'font', 'url': INTER_FONT_URL, 'local': False},
        {'type': 'image', 'url': 'https://cdn.example.com/avatar.png', 'local': True},
        {'type': 'image', 'url': 'https://cdn.example.com/ledger.jpg', 'local': True},
    ]
    assert data['options'] == {'includeAssets': True, 'minify': False, 'standalone': True}
    assert data['filename'] == 'jane_doe_portfolio.html'
    assert data['size'] == 'estimated'


def test_html_export_without_assets(portfolio, template):
    data = prepare_export(portfolio, template, 'html', {'includeAssets': False, 'customDomain': 'jane.dev'})
    assert data['assets'] == []
    assert data['options']['customDomain'] == 'jane.dev'


def test_pdf_export(portfolio, template):
    data = prepare_export(portfolio, template, 'pdf', {'orientation': 'landscape'})

    assert data['sourceUrl'] == f"/api/preview/{portfolio['id']}?template=modern-professional"
    assert data['options']['format'] == 'A4'
    assert data['options']['orientation'] == 'landscape'
    assert data['options']['margins'] == {'top': 20, 'right': 20, 'bottom': 20, 'left': 20}
    assert data['filename'] == 'jane_doe_portfolio.pdf'
    assert data['estimatedSize'] == '2-5 MB'


def test_json_export_strips_private_fields(portfolio, template):
    data = prepare_export(portfolio, template, 'json')
    exported = data['data']

    for key in ('id', 'createdAt', 'updatedAt'):
        assert key not in exported
    assert 'analytics' not in exported['settings']
    assert exported['exportMetadata']['version'] == '1.0'
    assert exported['exportMetadata']['format'] == 'portfolio-generator-json'
    assert data['size'] == len(json.dumps(exported, separators=(',', ':'), ensure_ascii=False))
    # the source portfolio keeps its analytics settings
    assert portfolio['settings']['analytics'] == {'googleAnalyticsId': 'G-123'}


def test_json_export_with_settings_and_no_metadata(portfolio, template):
    exported = prepare_export(portfolio, template, 'json', {'includeSettings': True, 'includeMetadata': False})['data']
    assert exported['id'] == portfolio['id']
    assert exported['settings']['analytics'] == {'googleAnalyticsId': 'G-123'}
    assert 'exportMetadata' not in exported


def test_unsupported_format(portfolio, template):
    with pytest.raises(UnsupportedExportFormat):
        prepare_export(portfolio, template, 'docx')


def test_assets_skip_non_dict_content(portfolio, template):
    portfolio['sections'][3]['content']['items'].append('Side project')
    portfolio['sections'][4]['content'] = 'jane@example.com'

    data = prepare_export(portfolio, template, 'html')
    assert [a['url'] for a in data['assets']][1:] == [
        'https://cdn.example.com/avatar.png',
        'https://cdn.example.com/ledger.jpg',
    ]
