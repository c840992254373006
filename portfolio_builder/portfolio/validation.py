"""Presence checks run before a portfolio is rendered or exported."""

import math

REQUIRED_SECTIONS = ('hero', 'about')


def round_half_up(value):
    return int(math.floor(value + 0.5))


def _has_content(section):
    content = section.get('content')
    return isinstance(content, dict) and len(content) > 0


def _items(content):
    items = content.get('items')
    return items if isinstance(items, list) else None


def _fields(item):
    return item if isinstance(item, dict) else {}


def validate_section(section, index):
    result = {'isValid': True, 'errors': [], 'warnings': []}
    number = index + 1

    if not section.get('type'):
        result['errors'].append(f"Section {number}: Missing section type")
        result['isValid'] = False

    content = section.get('content')
    # an empty object or list still counts as content
    if content is None or (not content and not isinstance(content, (dict, list))):
        result['warnings'].append(f"Section {number}: No content provided")
        return result
    if not isinstance(content, dict):
        content = {}

    section_type = section.get('type')
    if section_type == 'hero':
        if not content.get('name'):
            result['errors'].append("Hero section: Name is required")
            result['isValid'] = False
        if not content.get('title'):
            result['errors'].append("Hero section: Professional title is required")
            result['isValid'] = False

    elif section_type == 'about':
        if not content.get('bio'):
            result['errors'].append("About section: Bio/description is required")
            result['isValid'] = False

    elif section_type == 'experience':
        for item_number, item in enumerate(_items(content) or [], start=1):
            item = _fields(item)
            if not item.get('title'):
                result['warnings'].append(f"Experience item {item_number}: Title is recommended")
            if not item.get('company'):
                result['warnings'].append(f"Experience item {item_number}: Company is recommended")

    elif section_type == 'projects':
        for item_number, item in enumerate(_items(content) or [], start=1):
            item = _fields(item)
            if not item.get('title'):
                result['warnings'].append(f"Project item {item_number}: Title is recommended")
            if not item.get('description'):
                result['warnings'].append(f"Project item {item_number}: Description is recommended")

    elif section_type == 'skills':
        items = _items(content)
        if items is not None and len(items) == 0:
            result['warnings'].append("Skills section: No skills listed")

    elif section_type == 'contact':
        if not content.get('email') and not content.get('phone') and not content.get('location'):
            result['warnings'].append("Contact section: At least one contact method is recommended")

    return result


def validate_portfolio_data(portfolio):
    """Validation used by the render endpoint."""
    validation = {'isValid': True, 'errors': [], 'warnings': [], 'completeness': 0}

    if not portfolio.get('title'):
        validation['errors'].append("Portfolio title is required")
        validation['isValid'] = False

    sections = portfolio.get('sections')
    if not isinstance(sections, list):
        validation['errors'].append("Portfolio sections are required")
        validation['isValid'] = False
        return validation

    section_types = [s.get('type') for s in sections]
    for required in REQUIRED_SECTIONS:
        if required not in section_types:
            validation['errors'].append(f"Missing required section: {required}")
            validation['isValid'] = False

    for index, section in enumerate(sections):
        section_result = validate_section(section, index)
        validation['errors'].extend(section_result['errors'])
        validation['warnings'].extend(section_result['warnings'])
        if not section_result['isValid']:
            validation['isValid'] = False

    visible = [s for s in sections if s.get('isVisible')]
    complete = [s for s in visible if _has_content(s)]
    validation['completeness'] = (
        round_half_up(len(complete) / len(visible) * 100) if visible else 0
    )
    return validation


def _find_section(sections, section_type):
    return next((s for s in sections if s.get('type') == section_type), None)


def validate_for_export(portfolio):
    """Validation used by the export endpoint.

    Unlike the render check, completeness here is measured against every
    section, hidden ones included.
    """
    validation = {'canExport': True, 'issues': [], 'warnings': [], 'completeness': 0}
    sections = portfolio.get('sections') or []

    section_types = [s.get('type') for s in sections]
    for required in REQUIRED_SECTIONS:
        if required not in section_types:
            validation['issues'].append(f"Missing required section: {required}")
            validation['canExport'] = False

    hero = _find_section(sections, 'hero')
    if hero is not None:
        content = _fields(hero.get('content'))
        if not content.get('name'):
            validation['issues'].append("Name is required in hero section")
            validation['canExport'] = False
        if not content.get('title'):
            validation['issues'].append("Professional title is required in hero section")
            validation['canExport'] = False

    about = _find_section(sections, 'about')
    if about is not None and not _fields(about.get('content')).get('bio'):
        validation['issues'].append("Bio/description is required in about section")
        validation['canExport'] = False

    contact = _find_section(sections, 'contact')
    if contact is None:
        validation['warnings'].append("Contact section is recommended")
    elif not _fields(contact.get('content')).get('email'):
        validation['warnings'].append("Email address is recommended for contact")

    complete = [s for s in sections if s.get('isVisible') and _has_content(s)]
    validation['completeness'] = (
        round_half_up(len(complete) / len(sections) * 100) if sections else 0
    )

    settings = portfolio.get('settings') or {}
    if not settings.get('seoTitle'):
        validation['warnings'].append("SEO title not set - recommended for web export")
    if not settings.get('seoDescription'):
        validation['warnings'].append("SEO description not set - recommended for web export")

    return validation
