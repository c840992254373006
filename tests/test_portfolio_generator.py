from portfolio.catalog import DEFAULT_PREVIEW_DATA, get_template
from portfolio.portfolio_generator import (
    PortfolioGenerator,
    normalize_experience,
    normalize_project,
    normalize_skill,
)


def test_preview_data_from_sections(portfolio):
    data = PortfolioGenerator().build_preview_data(portfolio)
    personal = data['personalInfo']

    assert personal['name'] == 'Jane Doe'
    assert personal['title'] == 'Backend Engineer'
    assert personal['email'] == 'jane@example.com'
    assert personal['location'] == 'Berlin'
    # no phone in the contact section
    assert personal['phone'] == DEFAULT_PREVIEW_DATA['personalInfo']['phone']

    assert data['skills'][0] == {'name': 'Python', 'level': 95, 'category': 'technical'}
    assert data['skills'][2] == {'name': 'Mentoring', 'level': 80, 'category': 'General'}
    assert data['projects'][0]['image'] == 'https://cdn.example.com/ledger.jpg'
    assert data['experience'] == DEFAULT_PREVIEW_DATA['experience']
    assert data['socialLinks'] == portfolio['settings']['socialLinks']


def test_empty_portfolio_uses_defaults():
    data = PortfolioGenerator().build_preview_data({'sections': []})
    assert data['personalInfo'] == DEFAULT_PREVIEW_DATA['personalInfo']
    assert data['projects'] == DEFAULT_PREVIEW_DATA['projects']
    assert data['socialLinks'] == DEFAULT_PREVIEW_DATA['socialLinks']


def test_hidden_social_links_are_dropped(portfolio):
    portfolio['settings']['socialLinks'].append({'platform': 'twitter', 'url': 'https://x.com/j', 'isVisible': False})
    data = PortfolioGenerator().build_preview_data(portfolio)
    assert [link['platform'] for link in data['socialLinks']] == ['github']


def test_normalizers():
    assert normalize_experience({'position': 'Dev', 'organization': 'Acme', 'startDate': '2020'}) == {
        'title': 'Dev',
        'company': 'Acme',
        'duration': '2020 - Present',
        'description': '',
    }
    assert normalize_skill('Rust') == {'name': 'Rust', 'level': 80, 'category': 'General'}
    assert normalize_skill({'name': 'SQL', 'proficiency': 'beginner'})['level'] == 25

    project = normalize_project({'name': 'CLI', 'technologies': 'Python, Click', 'projectUrl': 'https://cli.dev'})
    assert project['title'] == 'CLI'
    assert project['technologies'] == ['Python', 'Click']
    assert project['link'] == 'https://cli.dev'


def test_theme_variables_fall_back():
    variables = dict(PortfolioGenerator().theme_variables({'colors': {'primary': '#111111'}}))
    assert variables['primary'] == '#111111'
    assert variables['secondary'] == '#64748b'
    assert variables['mono-font'] == 'JetBrains Mono, monospace'
    assert variables['border-radius'] == '0.5rem'


def test_generate_portfolio_html(portfolio):
    html = PortfolioGenerator().generate_portfolio(portfolio, get_template('developer-focus'))

    assert html.startswith('<!DOCTYPE html>')
    assert 'Jane Doe - Portfolio Preview' in html
    assert f"--primary: {portfolio['theme']['colors']['primary']};" in html
    assert '// projects' in html
    assert 'Ledger' in html


def test_unknown_template_renders_default(portfolio):
    template = dict(get_template('modern-professional'), id='does-not-exist')
    html = PortfolioGenerator().generate_portfolio(portfolio, template)
    assert 'Social Links' in html
    assert 'Jane Doe' in html


def test_string_items_are_normalized(portfolio):
    portfolio['sections'][2]['content']['items'] = ['Python', 'SQL']
    portfolio['sections'][3]['content']['items'] = ['Ledger']

    data = PortfolioGenerator().build_preview_data(portfolio)
    assert data['skills'] == [
        {'name': 'Python', 'level': 80, 'category': 'General'},
        {'name': 'SQL', 'level': 80, 'category': 'General'},
    ]
    assert data['projects'][0]['title'] == 'Ledger'
