import json

from portfolio.storage import (
    DEFAULT_USER_PREFERENCES,
    STORAGE_KEYS,
    CurrentPortfolioStorage,
    DraftStorage,
    MemoryStorage,
    PortfolioStorage,
    UserPreferencesStorage,
    clear_all_storage,
    export_data,
    import_data,
)


def test_get_all_empty(backend):
    assert PortfolioStorage(backend).get_all() == []


def test_save_then_read_round_trip(backend, portfolio):
    portfolios = PortfolioStorage(backend)
    portfolios.save(portfolio)
    assert portfolios.get_by_id(portfolio['id']) == portfolio
    assert json.loads(backend.get_item(STORAGE_KEYS['PORTFOLIOS'])) == [portfolio]


def test_save_existing_replaces_and_bumps_updated_at(backend, portfolio):
    portfolios = PortfolioStorage(backend)
    portfolios.save(portfolio)
    portfolios.save({**portfolio, 'title': 'Renamed'})

    stored = portfolios.get_all()
    assert len(stored) == 1
    assert stored[0]['title'] == 'Renamed'
    assert stored[0]['updatedAt'] != portfolio['updatedAt']
    assert stored[0]['updatedAt'].endswith('Z')


def test_corrupt_portfolios_read_as_empty(backend, caplog):
    backend.set_item(STORAGE_KEYS['PORTFOLIOS'], '{not json')
    assert PortfolioStorage(backend).get_all() == []
    assert 'Error reading portfolios' in caplog.text


def test_delete(backend, portfolio):
    portfolios = PortfolioStorage(backend)
    portfolios.save(portfolio)
    portfolios.save({**portfolio, 'id': 'other'})
    portfolios.delete(portfolio['id'])
    assert [p['id'] for p in portfolios.get_all()] == ['other']


def test_duplicate(backend, portfolio):
    portfolios = PortfolioStorage(backend)
    portfolios.save(portfolio)

    copy = portfolios.duplicate(portfolio['id'])
    assert copy['id'] != portfolio['id']
    assert copy['title'] == 'Jane Doe (Copy)'
    assert copy['sections'] == portfolio['sections']
    assert copy['createdAt'] == copy['updatedAt']
    assert len(portfolios.get_all()) == 2


def test_duplicate_missing_returns_none(backend):
    assert PortfolioStorage(backend).duplicate('missing') is None


def test_current_portfolio(backend):
    current = CurrentPortfolioStorage(backend)
    assert current.get() is None
    current.set('abc')
    assert current.get() == 'abc'
    current.clear()
    assert current.get() is None


def test_preferences_merge_with_defaults(backend):
    prefs = UserPreferencesStorage(backend)
    assert prefs.get() == DEFAULT_USER_PREFERENCES

    prefs.save({'theme': 'dark'})
    prefs.save({'language': 'de'})
    assert prefs.get() == {**DEFAULT_USER_PREFERENCES, 'theme': 'dark', 'language': 'de'}


def test_corrupt_preferences_fall_back_to_defaults(backend):
    backend.set_item(STORAGE_KEYS['USER_PREFERENCES'], 'nope')
    assert UserPreferencesStorage(backend).get() == DEFAULT_USER_PREFERENCES


def test_draft(backend):
    drafts = DraftStorage(backend)
    assert drafts.get() is None
    drafts.save({'personalInfo': {'fullName': 'Jane'}})
    assert drafts.get() == {'personalInfo': {'fullName': 'Jane'}}
    drafts.clear()
    assert drafts.get() is None


def test_export_import_and_clear(backend, portfolio):
    PortfolioStorage(backend).save(portfolio)
    CurrentPortfolioStorage(backend).set(portfolio['id'])
    UserPreferencesStorage(backend).save({'theme': 'light'})

    snapshot = export_data(backend)
    assert snapshot['currentPortfolio'] == portfolio['id']
    assert 'draftData' not in snapshot

    clear_all_storage(backend)
    assert all(backend.get_item(key) is None for key in STORAGE_KEYS.values())

    import_data(backend, snapshot)
    assert export_data(backend) == snapshot


def test_import_of_empty_snapshot_replaces_portfolios(backend, portfolio):
    PortfolioStorage(backend).save(portfolio)

    import_data(backend, export_data(MemoryStorage()))

    assert PortfolioStorage(backend).get_all() == []


def test_empty_draft_survives_round_trip(backend):
    DraftStorage(backend).save({})

    snapshot = export_data(backend)
    assert snapshot['draftData'] == {}

    clear_all_storage(backend)
    import_data(backend, snapshot)
    assert DraftStorage(backend).get() == {}
