from portfolio.validation import (
    round_half_up,
    validate_for_export,
    validate_portfolio_data,
    validate_section,
)


def test_round_half_up():
    assert round_half_up(62.5) == 63
    assert round_half_up(83.33) == 83


class TestValidatePortfolioData:

    def test_valid_portfolio(self, portfolio):
        result = validate_portfolio_data(portfolio)
        assert result['isValid']
        assert result['errors'] == []
        assert result['completeness'] == 100

    def test_missing_title_and_sections(self):
        result = validate_portfolio_data({'sections': 'nope'})
        assert result == {
            'isValid': False,
            'errors': ['Portfolio title is required', 'Portfolio sections are required'],
            'warnings': [],
            'completeness': 0,
        }

    def test_missing_required_sections(self, portfolio):
        portfolio['sections'] = [s for s in portfolio['sections'] if s['type'] not in ('hero', 'about')]
        result = validate_portfolio_data(portfolio)
        assert not result['isValid']
        assert result['errors'] == ['Missing required section: hero', 'Missing required section: about']

    def test_completeness_counts_visible_sections_only(self, portfolio):
        portfolio['sections'][2]['content'] = {}
        result = validate_portfolio_data(portfolio)
        assert result['completeness'] == 80

    def test_no_visible_sections(self, portfolio):
        for section in portfolio['sections']:
            section['isVisible'] = False
        assert validate_portfolio_data(portfolio)['completeness'] == 0


class TestValidateSection:

    def test_missing_type_and_content(self):
        result = validate_section({}, 2)
        assert result['errors'] == ['Section 3: Missing section type']
        assert result['warnings'] == ['Section 3: No content provided']
        assert not result['isValid']

    def test_empty_content_is_not_missing(self):
        result = validate_section({'type': 'custom', 'content': {}}, 0)
        assert result['warnings'] == []

    def test_hero_requires_name_and_title(self):
        result = validate_section({'type': 'hero', 'content': {'name': ''}}, 0)
        assert result['errors'] == ['Hero section: Name is required', 'Hero section: Professional title is required']

    def test_about_requires_bio(self):
        result = validate_section({'type': 'about', 'content': {'summary': 'x'}}, 0)
        assert result['errors'] == ['About section: Bio/description is required']

    def test_item_warnings(self):
        experience = validate_section({'type': 'experience', 'content': {'items': [{'title': 'Dev'}]}}, 0)
        assert experience['warnings'] == ['Experience item 1: Company is recommended']
        assert experience['isValid']

        projects = validate_section({'type': 'projects', 'content': {'items': [{}, {'title': 'a', 'description': 'b'}]}}, 0)
        assert projects['warnings'] == ['Project item 1: Title is recommended', 'Project item 1: Description is recommended']

    def test_skills_and_contact_warnings(self):
        assert validate_section({'type': 'skills', 'content': {'items': []}}, 0)['warnings'] == [
            'Skills section: No skills listed']
        assert validate_section({'type': 'contact', 'content': {'website': 'x'}}, 0)['warnings'] == [
            'Contact section: At least one contact method is recommended']


class TestValidateForExport:

    def test_exportable(self, portfolio):
        result = validate_for_export(portfolio)
        assert result['canExport']
        assert result['issues'] == []
        assert result['warnings'] == []
        # hidden section counts against completeness
        assert result['completeness'] == 83

    def test_issues(self, portfolio):
        portfolio['sections'][0]['content'] = {'name': 'Jane'}
        portfolio['sections'][1]['content'] = {}
        result = validate_for_export(portfolio)
        assert not result['canExport']
        assert result['issues'] == [
            'Professional title is required in hero section',
            'Bio/description is required in about section',
        ]

    def test_contact_and_seo_warnings(self, portfolio):
        portfolio['sections'] = portfolio['sections'][:2]
        portfolio['settings'] = {}
        result = validate_for_export(portfolio)
        assert result['canExport']
        assert result['warnings'] == [
            'Contact section is recommended',
            'SEO title not set - recommended for web export',
            'SEO description not set - recommended for web export',
        ]

    def test_contact_without_email(self, portfolio):
        portfolio['sections'][4]['content'] = {'phone': '+4912345'}
        assert 'Email address is recommended for contact' in validate_for_export(portfolio)['warnings']


class TestFreeFormContent:

    def test_blank_string_content_is_missing(self):
        result = validate_section({'type': 'custom', 'content': ''}, 1)
        assert result['warnings'] == ['Section 2: No content provided']

    def test_hero_with_list_content_still_checked(self):
        result = validate_section({'type': 'hero', 'content': ['Jane']}, 0)
        assert not result['isValid']
        assert result['errors'] == ['Hero section: Name is required', 'Hero section: Professional title is required']

    def test_string_items_get_item_warnings(self):
        result = validate_section({'type': 'projects', 'content': {'items': ['Ledger']}}, 0)
        assert result['warnings'] == ['Project item 1: Title is recommended', 'Project item 1: Description is recommended']

    def test_export_with_list_content(self, portfolio):
        portfolio['sections'][1]['content'] = ['bio']
        result = validate_for_export(portfolio)
        assert result['issues'] == ['Bio/description is required in about section']
