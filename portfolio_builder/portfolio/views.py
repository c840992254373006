import json
import logging

from django.conf import settings
from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from pydantic import ValidationError

from . import storage
from .assets import AssetManager
from .catalog import SORT_FIELDS, filter_templates, get_template, sort_templates, theme_from_template
from .exceptions import PortfolioNotFound, TemplateNotFound, UnsupportedExportFormat
from .exporter import prepare_export
from .portfolio_generator import PortfolioGenerator
from .renderer import render_portfolio_with_template
from .schemas import AssetRequest, ExportRequest, PreferencesUpdate, RenderRequest, ThemeSelectionRequest
from .validation import validate_for_export, validate_portfolio_data

logger = logging.getLogger(__name__)


class InvalidBody(Exception):
    pass


def parse_json_body(request):
    try:
        data = json.loads(request.body or b'{}')
    except (TypeError, ValueError) as e:
        raise InvalidBody(str(e)) from e
    if not isinstance(data, dict):
        raise InvalidBody("Expected a JSON object")
    return data


def parse_request(request, schema):
    return schema.model_validate(parse_json_body(request))


def invalid_body_response(exc=None):
    payload = {'error': 'Invalid request body'}
    if isinstance(exc, ValidationError):
        payload['details'] = json.loads(exc.json(include_url=False))
    return JsonResponse(payload, status=400)


def method_not_allowed():
    return JsonResponse({'error': 'Method not allowed'}, status=405)


def not_found(what):
    return JsonResponse({'error': f'{what} not found'}, status=404)


def _query_bool(value):
    if value is None or value == '':
        return None
    return value.lower() in ('1', 'true', 'yes')


# Template catalog

def template_list(request):
    if request.method != 'GET':
        return method_not_allowed()

    features = request.GET.getlist('features')
    if len(features) == 1 and ',' in features[0]:
        features = [f.strip() for f in features[0].split(',') if f.strip()]

    templates = filter_templates(
        search=request.GET.get('search'),
        category=request.GET.get('category'),
        features=features,
        is_premium=_query_bool(request.GET.get('isPremium')),
    )

    sort_field = request.GET.get('sort', 'popularity')
    if sort_field not in SORT_FIELDS:
        return JsonResponse({'error': f'Unknown sort field: {sort_field}'}, status=400)
    direction = 'asc' if request.GET.get('direction') == 'asc' else 'desc'

    templates = sort_templates(templates, sort_field, direction)
    return JsonResponse({'templates': templates, 'count': len(templates)})


def template_detail(request, template_id):
    if request.method != 'GET':
        return method_not_allowed()

    template = get_template(template_id)
    if template is None:
        return not_found('Template')
    return JsonResponse({'template': template})


def app_config(request):
    if request.method != 'GET':
        return method_not_allowed()
    return JsonResponse({'appUrl': settings.APP_URL, 'features': settings.FEATURES})


# Portfolio storage

@csrf_exempt
def portfolio_list(request):
    backend = storage.storage_for_request(request)
    portfolios = storage.PortfolioStorage(backend)

    if request.method == 'GET':
        return JsonResponse({'portfolios': portfolios.get_all()})

    if request.method != 'POST':
        return method_not_allowed()

    try:
        portfolio = parse_json_body(request)
    except InvalidBody:
        return invalid_body_response()

    timestamp = storage.now_iso()
    if not portfolio.get('id'):
        portfolio['id'] = storage.generate_id()
    for key in ('createdAt', 'updatedAt'):
        if not portfolio.get(key):
            portfolio[key] = timestamp
    portfolios.save(portfolio)
    logger.info("Saved portfolio %s", portfolio['id'])
    return JsonResponse({'portfolio': portfolios.get_by_id(portfolio['id'])}, status=201)


@csrf_exempt
def portfolio_detail(request, portfolio_id):
    backend = storage.storage_for_request(request)
    portfolios = storage.PortfolioStorage(backend)
    portfolio = portfolios.get_by_id(portfolio_id)

    if request.method not in ('GET', 'PUT', 'DELETE'):
        return method_not_allowed()
    if portfolio is None:
        return not_found('Portfolio')

    if request.method == 'GET':
        return JsonResponse({'portfolio': portfolio})

    if request.method == 'DELETE':
        portfolios.delete(portfolio_id)
        current = storage.CurrentPortfolioStorage(backend)
        if current.get() == portfolio_id:
            current.clear()
        logger.info("Deleted portfolio %s", portfolio_id)
        return JsonResponse({'success': True})

    try:
        changes = parse_json_body(request)
    except InvalidBody:
        return invalid_body_response()

    portfolios.save({**portfolio, **changes, 'id': portfolio_id})
    return JsonResponse({'portfolio': portfolios.get_by_id(portfolio_id)})


@csrf_exempt
def duplicate_portfolio(request, portfolio_id):
    if request.method != 'POST':
        return method_not_allowed()

    backend = storage.storage_for_request(request)
    duplicated = storage.PortfolioStorage(backend).duplicate(portfolio_id)
    if duplicated is None:
        return not_found('Portfolio')

    storage.CurrentPortfolioStorage(backend).set(duplicated['id'])
    return JsonResponse({'portfolio': duplicated}, status=201)


@csrf_exempt
def apply_theme(request, portfolio_id):
    """Switch a portfolio to a catalog template and one of its color schemes."""
    if request.method != 'POST':
        return method_not_allowed()

    try:
        body = parse_request(request, ThemeSelectionRequest)
    except (InvalidBody, ValidationError) as e:
        return invalid_body_response(e)

    portfolios = storage.PortfolioStorage(storage.storage_for_request(request))
    portfolio = portfolios.get_by_id(portfolio_id)
    if portfolio is None:
        return not_found('Portfolio')

    template = get_template(body.template_id)
    if template is None:
        return not_found('Template')

    portfolio['theme'] = theme_from_template(template, body.color_scheme_id)
    portfolios.save(portfolio)
    return JsonResponse({'portfolio': portfolios.get_by_id(portfolio_id)})


@csrf_exempt
def current_portfolio(request):
    current = storage.CurrentPortfolioStorage(storage.storage_for_request(request))

    if request.method == 'GET':
        return JsonResponse({'currentPortfolio': current.get()})

    if request.method == 'DELETE':
        current.clear()
        return JsonResponse({'success': True})

    if request.method != 'POST':
        return method_not_allowed()

    try:
        portfolio_id = parse_json_body(request).get('portfolioId')
    except InvalidBody:
        return invalid_body_response()
    if not isinstance(portfolio_id, str) or not portfolio_id:
        return JsonResponse({'error': 'portfolioId is required'}, status=400)

    current.set(portfolio_id)
    return JsonResponse({'currentPortfolio': portfolio_id})


@csrf_exempt
def preferences(request):
    prefs = storage.UserPreferencesStorage(storage.storage_for_request(request))

    if request.method == 'GET':
        return JsonResponse({'preferences': prefs.get()})

    if request.method != 'POST':
        return method_not_allowed()

    try:
        update = parse_request(request, PreferencesUpdate)
    except (InvalidBody, ValidationError) as e:
        return invalid_body_response(e)

    return JsonResponse({'preferences': prefs.save(update.changes())})


@csrf_exempt
def draft(request):
    drafts = storage.DraftStorage(storage.storage_for_request(request))

    if request.method == 'GET':
        return JsonResponse({'draft': drafts.get()})

    if request.method == 'DELETE':
        drafts.clear()
        return JsonResponse({'success': True})

    if request.method != 'POST':
        return method_not_allowed()

    try:
        data = parse_json_body(request)
    except InvalidBody:
        return invalid_body_response()

    drafts.save(data)
    return JsonResponse({'draft': data})


def storage_export(request):
    if request.method != 'GET':
        return method_not_allowed()
    return JsonResponse(storage.export_data(storage.storage_for_request(request)))


@csrf_exempt
def storage_import(request):
    if request.method != 'POST':
        return method_not_allowed()

    try:
        data = parse_json_body(request)
    except InvalidBody:
        return invalid_body_response()
    if data.get('portfolios') is not None and not isinstance(data['portfolios'], list):
        return JsonResponse({'error': 'portfolios must be a list'}, status=400)
    if data.get('userPreferences') is not None and not isinstance(data['userPreferences'], dict):
        return JsonResponse({'error': 'userPreferences must be an object'}, status=400)

    backend = storage.storage_for_request(request)
    storage.import_data(backend, data)
    return JsonResponse(storage.export_data(backend))


@csrf_exempt
def storage_clear(request):
    if request.method != 'POST':
        return method_not_allowed()

    storage.clear_all_storage(storage.storage_for_request(request))
    return JsonResponse({'success': True})


# Render / export pipeline

def load_portfolio(request, portfolio_id):
    portfolio = storage.PortfolioStorage(storage.storage_for_request(request)).get_by_id(portfolio_id)
    if portfolio is None:
        raise PortfolioNotFound(portfolio_id)
    return portfolio


def load_template(template_id):
    template = get_template(template_id)
    if template is None:
        raise TemplateNotFound(template_id)
    return template


def theme_id(portfolio):
    return (portfolio.get('theme') or {}).get('id')


@csrf_exempt
def render_portfolio(request):
    if request.method != 'POST':
        return method_not_allowed()

    try:
        body = parse_request(request, RenderRequest)
    except (InvalidBody, ValidationError) as e:
        return invalid_body_response(e)

    try:
        portfolio = load_portfolio(request, body.portfolio_id)
        template = load_template(body.template_id or theme_id(portfolio))

        validation = validate_portfolio_data(portfolio)
        if not validation['isValid']:
            return JsonResponse({'error': 'Portfolio validation failed', 'validation': validation}, status=400)

        rendered = render_portfolio_with_template(portfolio, template, body.options)

        return JsonResponse({
            'success': True,
            'data': rendered,
            'validation': validation,
            'template': {
                'id': template['id'],
                'name': template['name'],
                'category': template['category'],
            },
        })
    except PortfolioNotFound:
        return not_found('Portfolio')
    except TemplateNotFound:
        return not_found('Template')
    except Exception:
        logger.exception("Portfolio render error")
        return JsonResponse({'error': 'Failed to render portfolio'}, status=500)


@csrf_exempt
def export_portfolio(request):
    if request.method != 'POST':
        return method_not_allowed()

    try:
        body = parse_request(request, ExportRequest)
    except (InvalidBody, ValidationError) as e:
        return invalid_body_response(e)

    try:
        portfolio = load_portfolio(request, body.portfolio_id)
        template = load_template(theme_id(portfolio))

        validation = validate_for_export(portfolio)
        if not validation['canExport']:
            return JsonResponse({'error': 'Portfolio validation failed', 'validation': validation}, status=400)

        export_data = prepare_export(portfolio, template, body.format, body.options)
        return JsonResponse({'success': True, 'data': export_data, 'validation': validation})
    except PortfolioNotFound:
        return not_found('Portfolio')
    except TemplateNotFound:
        return not_found('Template')
    except UnsupportedExportFormat:
        return JsonResponse({'error': 'Unsupported export format'}, status=400)
    except Exception:
        logger.exception("Export preparation error")
        return JsonResponse({'error': 'Failed to prepare export'}, status=500)


@csrf_exempt
def process_assets(request):
    if request.method != 'POST':
        return method_not_allowed()

    try:
        body = parse_request(request, AssetRequest)
    except (InvalidBody, ValidationError) as e:
        return invalid_body_response(e)

    try:
        portfolio = load_portfolio(request, body.portfolio_id)
        manager = AssetManager()
        assets = manager.process_portfolio_assets(portfolio, body.options.to_processing_options())
        return JsonResponse({
            'success': True,
            'assets': [asset.to_dict() for asset in assets],
            'totalSize': manager.get_total_size(),
        })
    except PortfolioNotFound:
        return not_found('Portfolio')
    except Exception:
        logger.exception("Asset processing error")
        return JsonResponse({'error': 'Failed to process assets'}, status=500)


def preview_portfolio(request, portfolio_id):
    if request.method != 'GET':
        return method_not_allowed()

    try:
        portfolio = load_portfolio(request, portfolio_id)
        template = load_template(request.GET.get('template') or theme_id(portfolio))

        html_content = PortfolioGenerator().generate_portfolio(portfolio, template)

        response = HttpResponse(html_content, content_type='text/html')
        response['Cache-Control'] = 'no-cache, no-store, must-revalidate'
        response['Pragma'] = 'no-cache'
        response['Expires'] = '0'
        return response
    except PortfolioNotFound:
        return not_found('Portfolio')
    except TemplateNotFound:
        return not_found('Template')
    except Exception:
        logger.exception("Preview generation error")
        return JsonResponse({'error': 'Failed to generate preview'}, status=500)
