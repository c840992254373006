from portfolio.catalog import (
    PORTFOLIO_TEMPLATES,
    filter_templates,
    get_template,
    sort_templates,
    supports_skill_categories,
    theme_from_template,
)


def test_catalog_ids():
    assert [t['id'] for t in PORTFOLIO_TEMPLATES] == [
        'modern-professional',
        'creative-portfolio',
        'developer-focus',
        'minimal-clean',
        'academic-research',
    ]


def test_get_template():
    assert get_template('developer-focus')['category'] == 'developer'
    assert get_template('default') is None


def test_search_matches_features_case_insensitively():
    ids = [t['id'] for t in filter_templates(search='github')]
    assert ids == ['developer-focus']


def test_filter_by_category_and_features():
    assert [t['id'] for t in filter_templates(category='minimal')] == ['minimal-clean']
    ids = [t['id'] for t in filter_templates(features=['Project Gallery', 'Academic CV'])]
    assert ids == ['modern-professional', 'academic-research']


def test_filter_premium():
    assert filter_templates(is_premium=True) == []
    assert len(filter_templates(is_premium=False)) == len(PORTFOLIO_TEMPLATES)


def test_sort_by_name():
    names = [t['name'] for t in sort_templates(PORTFOLIO_TEMPLATES, 'name', 'asc')]
    assert names == sorted(names)


def test_sort_by_popularity_puts_popular_first():
    ordered = sort_templates(PORTFOLIO_TEMPLATES, 'popularity', 'desc')
    assert [t['id'] for t in ordered[:2]] == ['modern-professional', 'developer-focus']


def test_sort_by_newest():
    assert sort_templates(PORTFOLIO_TEMPLATES, 'newest', 'desc')[0]['id'] == 'creative-portfolio'


def test_skill_categories_follow_features():
    assert supports_skill_categories(get_template('modern-professional'))
    assert supports_skill_categories(get_template('developer-focus'))
    assert not supports_skill_categories(get_template('minimal-clean'))


def test_theme_from_template_uses_chosen_scheme():
    template = get_template('developer-focus')
    theme = theme_from_template(template, 'developer-github')
    assert theme['id'] == 'developer-focus'
    assert theme['colors']['primary'] == '#238636'
    assert theme['fonts'] == {'heading': 'JetBrains Mono', 'body': 'Source Code Pro', 'mono': 'Fira Code'}


def test_theme_from_template_defaults_to_first_scheme():
    theme = theme_from_template(get_template('minimal-clean'), 'unknown')
    assert theme['colors']['primary'] == '#000000'
    assert theme['fonts']['mono'] == 'monospace'
