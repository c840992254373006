"""
Per-browser key-value storage for portfolios, preferences and wizard drafts.

Every value is kept as a JSON string under a fixed key, the same way a browser
keeps them in local storage. ``SessionStorage`` binds the store to a Django
session so each browser sees only its own data; ``MemoryStorage`` is a plain
dict used from scripts and tests.
"""

import copy
import json
import logging
from datetime import datetime, timezone

from bson import ObjectId

logger = logging.getLogger(__name__)

STORAGE_KEYS = {
    'PORTFOLIOS': 'portfolio-generator-portfolios',
    'CURRENT_PORTFOLIO': 'portfolio-generator-current',
    'USER_PREFERENCES': 'portfolio-generator-preferences',
    'DRAFT_DATA': 'portfolio-generator-draft',
}

DEFAULT_USER_PREFERENCES = {
    'theme': 'system',
    'language': 'en',
    'autoSave': True,
    'notifications': True,
}


def now_iso():
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def generate_id():
    return str(ObjectId())


class MemoryStorage:
    def __init__(self, initial=None):
        self._items = dict(initial or {})

    def get_item(self, key):
        return self._items.get(key)

    def set_item(self, key, value):
        self._items[key] = value

    def remove_item(self, key):
        self._items.pop(key, None)


class SessionStorage:
    """Storage backed by ``request.session``."""

    def __init__(self, session):
        self.session = session

    def get_item(self, key):
        return self.session.get(key)

    def set_item(self, key, value):
        self.session[key] = value

    def remove_item(self, key):
        if key in self.session:
            del self.session[key]


def storage_for_request(request):
    return SessionStorage(request.session)


class PortfolioStorage:
    def __init__(self, backend):
        self.backend = backend

    def get_all(self):
        stored = self.backend.get_item(STORAGE_KEYS['PORTFOLIOS'])
        if not stored:
            return []
        try:
            portfolios = json.loads(stored)
        except (TypeError, ValueError) as e:
            logger.error("Error reading portfolios from storage: %s", e)
            return []
        if not isinstance(portfolios, list):
            logger.error("Error reading portfolios from storage: expected a list")
            return []
        return portfolios

    def _write(self, portfolios):
        self.backend.set_item(STORAGE_KEYS['PORTFOLIOS'], json.dumps(portfolios))

    def save(self, portfolio):
        portfolios = self.get_all()
        for index, existing in enumerate(portfolios):
            if existing.get('id') == portfolio.get('id'):
                portfolios[index] = {**portfolio, 'updatedAt': now_iso()}
                break
        else:
            portfolios.append(portfolio)
        self._write(portfolios)

    def get_by_id(self, portfolio_id):
        for portfolio in self.get_all():
            if portfolio.get('id') == portfolio_id:
                return portfolio
        return None

    def delete(self, portfolio_id):
        portfolios = [p for p in self.get_all() if p.get('id') != portfolio_id]
        self._write(portfolios)

    def duplicate(self, portfolio_id):
        original = self.get_by_id(portfolio_id)
        if original is None:
            return None

        timestamp = now_iso()
        duplicated = copy.deepcopy(original)
        duplicated.update({
            'id': generate_id(),
            'title': f"{original.get('title', '')} (Copy)",
            'createdAt': timestamp,
            'updatedAt': timestamp,
        })
        self.save(duplicated)
        return duplicated


class CurrentPortfolioStorage:
    def __init__(self, backend):
        self.backend = backend

    def get(self):
        return self.backend.get_item(STORAGE_KEYS['CURRENT_PORTFOLIO'])

    def set(self, portfolio_id):
        self.backend.set_item(STORAGE_KEYS['CURRENT_PORTFOLIO'], portfolio_id)

    def clear(self):
        self.backend.remove_item(STORAGE_KEYS['CURRENT_PORTFOLIO'])


class UserPreferencesStorage:
    def __init__(self, backend):
        self.backend = backend

    def get(self):
        stored = self.backend.get_item(STORAGE_KEYS['USER_PREFERENCES'])
        if not stored:
            return dict(DEFAULT_USER_PREFERENCES)
        try:
            return {**DEFAULT_USER_PREFERENCES, **json.loads(stored)}
        except (TypeError, ValueError) as e:
            logger.error("Error reading user preferences from storage: %s", e)
            return dict(DEFAULT_USER_PREFERENCES)

    def save(self, preferences):
        updated = {**self.get(), **preferences}
        self.backend.set_item(STORAGE_KEYS['USER_PREFERENCES'], json.dumps(updated))
        return updated


class DraftStorage:
    def __init__(self, backend):
        self.backend = backend

    def get(self):
        stored = self.backend.get_item(STORAGE_KEYS['DRAFT_DATA'])
        if not stored:
            return None
        try:
            return json.loads(stored)
        except (TypeError, ValueError) as e:
            logger.error("Error reading draft data from storage: %s", e)
            return None

    def save(self, data):
        self.backend.set_item(STORAGE_KEYS['DRAFT_DATA'], json.dumps(data))

    def clear(self):
        self.backend.remove_item(STORAGE_KEYS['DRAFT_DATA'])


def clear_all_storage(backend):
    for key in STORAGE_KEYS.values():
        backend.remove_item(key)


def export_data(backend):
    """Snapshot of everything stored for one browser."""
    data = {
        'portfolios': PortfolioStorage(backend).get_all(),
        'userPreferences': UserPreferencesStorage(backend).get(),
    }
    current = CurrentPortfolioStorage(backend).get()
    if current:
        data['currentPortfolio'] = current
    draft = DraftStorage(backend).get()
    if draft is not None:
        data['draftData'] = draft
    return data


def import_data(backend, data):
    if data.get('portfolios') is not None:
        backend.set_item(STORAGE_KEYS['PORTFOLIOS'], json.dumps(data['portfolios']))
    if data.get('currentPortfolio'):
        CurrentPortfolioStorage(backend).set(data['currentPortfolio'])
    if data.get('userPreferences') is not None:
        UserPreferencesStorage(backend).save(data['userPreferences'])
    if data.get('draftData') is not None:
        DraftStorage(backend).save(data['draftData'])
