"""
Export descriptors.

Nothing is written to disk here: each format returns a description of what
a real export would contain (source URL, assets, options, filename).
"""

import copy
import json
import re

from .exceptions import UnsupportedExportFormat
from .storage import now_iso

EXPORT_FORMATS = ('html', 'pdf', 'json')

INTER_FONT_URL = 'https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&display=swap'


def export_filename(portfolio, extension):
    slug = re.sub(r'[^a-z0-9]', '_', portfolio.get('title') or 'portfolio', flags=re.IGNORECASE).lower()
    return f"{slug}_portfolio.{extension}"


def preview_url(portfolio, template):
    return f"/api/preview/{portfolio.get('id')}?template={template['id']}"


def collect_export_assets(portfolio):
    assets = [{'type': 'font', 'url': INTER_FONT_URL, 'local': False}]
    for section in portfolio.get('sections') or []:
        content = section.get('content')
        if not isinstance(content, dict):
            continue
        if content.get('avatar'):
            assets.append({'type': 'image', 'url': content['avatar'], 'local': True})
        if section.get('type') == 'projects' and isinstance(content.get('items'), list):
            for project in content['items']:
                if isinstance(project, dict) and project.get('image'):
                    assets.append({'type': 'image', 'url': project['image'], 'local': True})
    return assets


def prepare_html_export(portfolio, template, options):
    export_options = {
        'includeAssets': True,
        'minify': False,
        'standalone': True,
        **options,
    }

    return {
        'format': 'html',
        'htmlUrl': preview_url(portfolio, template),
        'assets': collect_export_assets(portfolio) if export_options['includeAssets'] else [],
        'options': export_options,
        'filename': export_filename(portfolio, 'html'),
        'size': 'estimated',
    }


def prepare_pdf_export(portfolio, template, options):
    export_options = {
        'format': 'A4',
        'orientation': 'portrait',
        'margins': {'top': 20, 'right': 20, 'bottom': 20, 'left': 20},
        'includeImages': True,
        'quality': 'high',
        **options,
    }

    return {
        'format': 'pdf',
        'sourceUrl': preview_url(portfolio, template),
        'options': export_options,
        'filename': export_filename(portfolio, 'pdf'),
        'estimatedSize': '2-5 MB',
    }


def prepare_json_export(portfolio, options):
    export_options = {
        'includeMetadata': True,
        'includeSettings': False,
        'format': 'pretty',
        **options,
    }

    data = copy.deepcopy(portfolio)
    if not export_options['includeSettings']:
        if isinstance(data.get('settings'), dict):
            data['settings'].pop('analytics', None)
        for key in ('id', 'createdAt', 'updatedAt'):
            data.pop(key, None)

    if export_options['includeMetadata']:
        data['exportMetadata'] = {
            'exportedAt': now_iso(),
            'version': '1.0',
            'format': 'portfolio-generator-json',
        }

    return {
        'format': 'json',
        'data': data,
        'options': export_options,
        'filename': export_filename(portfolio, 'json'),
        'size': len(json.dumps(data, separators=(',', ':'), ensure_ascii=False)),
    }


def prepare_export(portfolio, template, export_format='html', options=None):
    options = options or {}
    if export_format == 'html':
        return prepare_html_export(portfolio, template, options)
    elif export_format == 'pdf':
        return prepare_pdf_export(portfolio, template, options)
    elif export_format == 'json':
        return prepare_json_export(portfolio, options)
    raise UnsupportedExportFormat(export_format)
