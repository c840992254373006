import logging

from django.template.loader import render_to_string

from .catalog import DEFAULT_PREVIEW_DATA

logger = logging.getLogger(__name__)

PROFICIENCY_LEVELS = {
    'beginner': 25,
    'intermediate': 50,
    'advanced': 75,
    'expert': 95,
}

# (css variable, theme color key, fallback)
COLOR_VARIABLES = [
    ('primary', 'primary', '#2563eb'),
    ('secondary', 'secondary', '#64748b'),
    ('accent', 'accent', '#0ea5e9'),
    ('background', 'background', '#ffffff'),
    ('foreground', 'foreground', '#0f172a'),
    ('muted', 'muted', '#f1f5f9'),
    ('border', 'border', '#e2e8f0'),
    ('card', 'card', '#ffffff'),
    ('card-foreground', 'cardForeground', '#0f172a'),
    ('popover', 'popover', '#ffffff'),
    ('popover-foreground', 'popoverForeground', '#0f172a'),
    ('destructive', 'destructive', '#ef4444'),
    ('destructive-foreground', 'destructiveForeground', '#ffffff'),
    ('ring', 'ring', '#2563eb'),
]

FONT_VARIABLES = [
    ('heading-font', 'heading', 'Inter, sans-serif'),
    ('body-font', 'body', 'Inter, sans-serif'),
    ('mono-font', 'mono', 'JetBrains Mono, monospace'),
]


def _value(value, default):
    return default if value is None or value == '' else value


def _section_content(portfolio, section_type):
    for section in portfolio.get('sections') or []:
        if section.get('type') == section_type:
            content = section.get('content')
            return content if isinstance(content, dict) else {}
    return {}


def _as_dict(item, key):
    if isinstance(item, dict):
        return item
    if isinstance(item, str):
        return {key: item}
    return {}


def _technologies(value):
    if isinstance(value, str):
        return [t.strip() for t in value.split(',') if t.strip()]
    return list(value or [])


def normalize_experience(item):
    item = _as_dict(item, 'title')
    duration = item.get('duration')
    if not duration and (item.get('startDate') or item.get('endDate')):
        duration = f"{item.get('startDate') or ''} - {item.get('endDate') or 'Present'}"
    return {
        'title': item.get('position') or item.get('title') or '',
        'company': item.get('company') or item.get('organization') or '',
        'duration': duration or '',
        'description': item.get('description') or '',
    }


def normalize_education(item):
    item = _as_dict(item, 'degree')
    return {
        'degree': item.get('degree') or item.get('title') or '',
        'school': item.get('school') or item.get('institution') or '',
        'year': item.get('year') or item.get('endDate') or '',
    }


def normalize_skill(item):
    item = _as_dict(item, 'name')
    level = item.get('level') or PROFICIENCY_LEVELS.get(item.get('proficiency'), 80)
    return {
        'name': item.get('name') or item.get('skill') or '',
        'level': level,
        'category': item.get('category') or 'General',
    }


def normalize_project(item):
    item = _as_dict(item, 'title')
    return {
        'title': item.get('title') or item.get('name') or '',
        'description': item.get('description') or '',
        'image': item.get('image') or item.get('imageUrl') or '',
        'technologies': _technologies(item.get('technologies')),
        'link': item.get('link') or item.get('projectUrl') or item.get('url') or '',
        'github': item.get('githubUrl') or item.get('github') or '',
    }


class PortfolioGenerator:
    """Renders the HTML preview of a stored portfolio with a catalog template."""

    template_dir = 'portfolio/preview'

    def build_preview_data(self, portfolio):
        """Pull the template context out of the portfolio's sections.

        Anything the portfolio does not provide comes from the default
        preview data, so a half-filled portfolio still renders a full page.
        """
        defaults = DEFAULT_PREVIEW_DATA
        hero = _section_content(portfolio, 'hero')
        about = _section_content(portfolio, 'about')
        contact = _section_content(portfolio, 'contact')

        personal = defaults['personalInfo']
        personal_info = {
            'name': _value(hero.get('name'), personal['name']),
            'title': _value(hero.get('title'), personal['title']),
            'bio': _value(about.get('bio'), personal['bio']),
            'avatar': _value(hero.get('avatar'), personal['avatar']),
            'location': _value(contact.get('location'), personal['location']),
            'email': _value(contact.get('email'), personal['email']),
            'phone': _value(contact.get('phone'), personal['phone']),
        }

        def items(section_type, normalize, fallback):
            found = _section_content(portfolio, section_type).get('items')
            if not isinstance(found, list):
                return fallback
            return [normalize(item) for item in found]

        settings = portfolio.get('settings') or {}
        social_links = settings.get('socialLinks')
        if not isinstance(social_links, list):
            social_links = defaults['socialLinks']
        else:
            social_links = [
                link for link in social_links if isinstance(link, dict) and link.get('isVisible', True)
            ]

        return {
            'personalInfo': personal_info,
            'experience': items('experience', normalize_experience, defaults['experience']),
            'education': items('education', normalize_education, defaults['education']),
            'skills': items('skills', normalize_skill, defaults['skills']),
            'projects': items('projects', normalize_project, defaults['projects']),
            'socialLinks': social_links,
        }

    def theme_variables(self, theme):
        theme = theme or {}
        colors = theme.get('colors') or {}
        fonts = theme.get('fonts') or {}
        variables = [(name, _value(colors.get(key), fallback)) for name, key, fallback in COLOR_VARIABLES]
        variables += [(name, _value(fonts.get(key), fallback)) for name, key, fallback in FONT_VARIABLES]
        variables.append(('border-radius', _value(theme.get('borderRadius'), '0.5rem')))
        return variables

    def template_name(self, template_id):
        return [f'{self.template_dir}/{template_id}.html', f'{self.template_dir}/default.html']

    def generate_portfolio(self, portfolio, template):
        """Return the preview page for ``portfolio`` rendered with ``template``."""
        data = self.build_preview_data(portfolio)
        context = {
            'template': template,
            'data': data,
            'personal': data['personalInfo'],
            'css_variables': self.theme_variables(portfolio.get('theme')),
        }
        logger.debug("Rendering preview of %s with %s", portfolio.get('id'), template['id'])
        return render_to_string(self.template_name(template['id']), context)
