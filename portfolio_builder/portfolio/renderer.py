"""Merge a portfolio with a catalog template into a render descriptor."""

from .catalog import default_colors, default_fonts, supports_skill_categories
from .storage import now_iso

DEFAULT_RENDER_OPTIONS = {
    'includeStyles': True,
    'includeScripts': True,
    'optimizeImages': False,
    'minify': False,
}


def group_skills_by_category(skills):
    groups = {}
    for skill in skills:
        category = (skill.get('category') if isinstance(skill, dict) else None) or 'Other'
        groups.setdefault(category, []).append(skill)
    return [{'name': name, 'items': items} for name, items in groups.items()]


def _trimmed(value):
    return value.strip() if isinstance(value, str) else value


def process_content_for_template(content, section_type, template):
    if not isinstance(content, dict):
        return content

    processed = dict(content)

    if section_type == 'hero':
        if processed.get('description'):
            processed['description'] = _trimmed(processed['description'])

    elif section_type == 'about':
        if processed.get('bio'):
            processed['bio'] = _trimmed(processed['bio'])

    elif section_type in ('experience', 'projects'):
        if isinstance(processed.get('items'), list):
            items = []
            for item in processed['items']:
                if not isinstance(item, dict):
                    items.append(item)
                    continue
                item = dict(item)
                description = item.pop('description', None)
                if isinstance(description, str):
                    item['description'] = description.strip()
                items.append(item)
            processed['items'] = items

    elif section_type == 'skills':
        if isinstance(processed.get('items'), list) and supports_skill_categories(template):
            processed['categorizedItems'] = group_skills_by_category(processed['items'])

    return processed


def generate_css_variables(theme):
    variables = {}
    for prefix, group in (('color', 'colors'), ('font', 'fonts'), ('spacing', 'spacing')):
        for key, value in (theme.get(group) or {}).items():
            variables[f'--{prefix}-{key}'] = value
    return variables


def build_theme_config(portfolio, template):
    theme = portfolio.get('theme') or {}
    return {
        **theme,
        'template': template['id'],
        'colors': theme.get('colors') or default_colors(template),
        'fonts': theme.get('fonts') or default_fonts(template),
    }


def build_metadata(portfolio):
    settings = portfolio.get('settings') or {}
    title = portfolio.get('title', '')
    return {
        'title': settings.get('seoTitle') or f"{title} - Portfolio",
        'description': settings.get('seoDescription') or f"Professional portfolio of {title}",
        'keywords': settings.get('seoKeywords') or [],
        'author': title,
        'viewport': 'width=device-width, initial-scale=1.0',
        'charset': 'UTF-8',
    }


def render_portfolio_with_template(portfolio, template, options=None):
    render_options = {**DEFAULT_RENDER_OPTIONS, **(options or {})}

    sections = [
        {**section, 'content': process_content_for_template(section.get('content'), section.get('type'), template)}
        for section in portfolio.get('sections', [])
        if section.get('isVisible')
    ]

    theme = build_theme_config(portfolio, template)

    return {
        'portfolio': {**portfolio, 'sections': sections},
        'template': template,
        'theme': theme,
        'cssVariables': generate_css_variables(theme),
        'metadata': build_metadata(portfolio),
        'options': render_options,
        'renderedAt': now_iso(),
    }
