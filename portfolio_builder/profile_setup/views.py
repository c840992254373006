import json
import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt

from portfolio.storage import CurrentPortfolioStorage, DraftStorage, PortfolioStorage, storage_for_request

from .wizard import (
    StepLocked,
    StepNotFound,
    StepValidationError,
    WizardIncomplete,
    build_portfolio,
    submit_step,
    wizard_state,
)

logger = logging.getLogger(__name__)


def setup_state(request):
    """Current wizard progress and the saved draft."""
    if request.method != 'GET':
        return JsonResponse({'error': 'Method not allowed'}, status=405)

    try:
        draft = DraftStorage(storage_for_request(request)).get()
        return JsonResponse(wizard_state(draft))
    except Exception:
        logger.exception("Profile setup state error")
        return JsonResponse({'error': 'Failed to load profile setup'}, status=500)


@csrf_exempt
def save_step(request, step_id):
    if request.method != 'POST':
        return JsonResponse({'error': 'Method not allowed'}, status=405)

    try:
        payload = json.loads(request.body or b'{}')
    except ValueError:
        return JsonResponse({'error': 'Invalid request body'}, status=400)
    if not isinstance(payload, dict):
        return JsonResponse({'error': 'Invalid request body'}, status=400)

    try:
        drafts = DraftStorage(storage_for_request(request))
        draft = submit_step(drafts.get(), step_id, payload)
        drafts.save(draft)
        return JsonResponse(wizard_state(draft))
    except StepNotFound:
        return JsonResponse({'error': 'Invalid step'}, status=404)
    except StepLocked as e:
        return JsonResponse({'error': 'Previous steps must be completed first', 'missingSteps': e.missing}, status=400)
    except StepValidationError as e:
        return JsonResponse({'error': 'Step validation failed', 'errors': e.errors}, status=400)
    except Exception:
        logger.exception("Profile setup step error")
        return JsonResponse({'error': 'Failed to save profile step'}, status=500)


@csrf_exempt
def complete_setup(request):
    """Create the portfolio from the finished wizard and make it current."""
    if request.method != 'POST':
        return JsonResponse({'error': 'Method not allowed'}, status=405)

    try:
        backend = storage_for_request(request)
        drafts = DraftStorage(backend)
        portfolio = build_portfolio(drafts.get())

        PortfolioStorage(backend).save(portfolio)
        CurrentPortfolioStorage(backend).set(portfolio['id'])
        drafts.clear()
        logger.info("Created portfolio %s from profile setup", portfolio['id'])
        return JsonResponse({'success': True, 'portfolio': portfolio}, status=201)
    except WizardIncomplete as e:
        return JsonResponse({'error': 'Profile setup is not complete', 'missingSteps': e.missing}, status=400)
    except Exception:
        logger.exception("Profile setup completion error")
        return JsonResponse({'error': 'Failed to complete profile setup'}, status=500)


@csrf_exempt
def reset_setup(request):
    if request.method != 'POST':
        return JsonResponse({'error': 'Method not allowed'}, status=405)

    DraftStorage(storage_for_request(request)).clear()
    return JsonResponse(wizard_state(None))
