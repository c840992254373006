"""Static catalog of portfolio templates, color schemes and preview data."""

import copy

DEFAULT_TEMPLATE_ID = 'modern-professional'


def _colors(primary, secondary, accent, background, foreground, muted, border,
            card, card_foreground, destructive='#ef4444', ring=None):
    return {
        'primary': primary,
        'secondary': secondary,
        'accent': accent,
        'background': background,
        'foreground': foreground,
        'muted': muted,
        'border': border,
        'card': card,
        'cardForeground': card_foreground,
        'popover': card,
        'popoverForeground': card_foreground,
        'destructive': destructive,
        'destructiveForeground': '#ffffff',
        'ring': ring or primary,
    }


COLOR_SCHEMES = {
    'modern': [
        {
            'id': 'modern-blue',
            'name': 'Professional Blue',
            'colors': _colors('#2563eb', '#64748b', '#0ea5e9', '#ffffff', '#0f172a',
                              '#f1f5f9', '#e2e8f0', '#ffffff', '#0f172a'),
            'gradients': {
                'primary': 'linear-gradient(135deg, #2563eb 0%, #0ea5e9 100%)',
                'secondary': 'linear-gradient(135deg, #64748b 0%, #94a3b8 100%)',
                'accent': 'linear-gradient(135deg, #0ea5e9 0%, #06b6d4 100%)',
            },
        },
        {
            'id': 'modern-dark',
            'name': 'Modern Dark',
            'colors': _colors('#3b82f6', '#6b7280', '#10b981', '#0f172a', '#f8fafc',
                              '#1e293b', '#334155', '#1e293b', '#f8fafc'),
        },
    ],
    'creative': [
        {
            'id': 'creative-purple',
            'name': 'Creative Purple',
            'colors': _colors('#7c3aed', '#a855f7', '#ec4899', '#fefce8', '#581c87',
                              '#faf5ff', '#e879f9', '#ffffff', '#581c87'),
            'gradients': {
                'primary': 'linear-gradient(135deg, #7c3aed 0%, #a855f7 50%, #ec4899 100%)',
                'secondary': 'linear-gradient(135deg, #a855f7 0%, #ec4899 100%)',
                'accent': 'linear-gradient(135deg, #ec4899 0%, #f97316 100%)',
            },
        },
        {
            'id': 'creative-rainbow',
            'name': 'Rainbow Gradient',
            'colors': _colors('#f59e0b', '#ef4444', '#8b5cf6', '#fffbeb', '#92400e',
                              '#fef3c7', '#fbbf24', '#ffffff', '#92400e'),
        },
    ],
    'minimal': [
        {
            'id': 'minimal-mono',
            'name': 'Monochrome',
            'colors': _colors('#000000', '#6b7280', '#374151', '#ffffff', '#111827',
                              '#f9fafb', '#e5e7eb', '#ffffff', '#111827'),
        },
        {
            'id': 'minimal-warm',
            'name': 'Warm Minimal',
            'colors': _colors('#92400e', '#a3a3a3', '#d97706', '#fffbeb', '#451a03',
                              '#fef3c7', '#fed7aa', '#ffffff', '#451a03'),
        },
    ],
    'developer': [
        {
            'id': 'developer-terminal',
            'name': 'Terminal Green',
            'colors': _colors('#10b981', '#6b7280', '#06b6d4', '#0f172a', '#00ff41',
                              '#1e293b', '#334155', '#111827', '#00ff41'),
        },
        {
            'id': 'developer-github',
            'name': 'GitHub Style',
            'colors': _colors('#238636', '#656d76', '#0969da', '#ffffff', '#24292f',
                              '#f6f8fa', '#d0d7de', '#ffffff', '#24292f',
                              destructive='#cf222e'),
        },
    ],
    'academic': [
        {
            'id': 'academic-classic',
            'name': 'Academic Blue',
            'colors': _colors('#1e40af', '#64748b', '#0f766e', '#ffffff', '#1e293b',
                              '#f8fafc', '#cbd5e1', '#ffffff', '#1e293b',
                              destructive='#dc2626'),
        },
    ],
}


def _preview(template_id):
    base = f'/templates/{template_id}'
    return {
        'thumbnail': f'{base}/thumbnail.jpg',
        'images': {
            'desktop': f'{base}/desktop.jpg',
            'tablet': f'{base}/tablet.jpg',
            'mobile': f'{base}/mobile.jpg',
        },
    }


def _layout_option(option_id, name, description, layout):
    return {
        'id': option_id,
        'name': name,
        'description': description,
        'preview': f'/layouts/{option_id}.jpg',
        'config': {'layout': layout},
    }


def _font(font_id, name, family, weights, category, preview):
    return {
        'id': font_id,
        'name': name,
        'family': family,
        'weights': weights,
        'category': category,
        'preview': preview,
    }


def _responsive(desktop, navigation, sidebar, cards):
    return {
        'breakpoints': {'mobile': '768px', 'tablet': '1024px', 'desktop': desktop},
        'behavior': {'navigation': navigation, 'sidebar': sidebar, 'cards': cards},
    }


def _customization(category, fonts, layout_options, can_customize_style):
    return {
        'colors': {'canCustomize': True, 'presets': COLOR_SCHEMES[category]},
        'typography': {'canCustomize': True, 'fontOptions': fonts},
        'layout': {'canCustomize': bool(layout_options), 'options': layout_options},
        'sections': {
            'canReorder': True,
            'canToggleVisibility': True,
            'canCustomizeStyle': can_customize_style,
        },
    }


_SIDEBAR_LEFT = _layout_option('sidebar-left', 'Left Sidebar', 'Navigation on the left side', {
    'type': 'sidebar', 'sidebarPosition': 'left', 'maxWidth': '1200px', 'spacing': 'normal'})
_SIDEBAR_RIGHT = _layout_option('sidebar-right', 'Right Sidebar', 'Navigation on the right side', {
    'type': 'sidebar', 'sidebarPosition': 'right', 'maxWidth': '1200px', 'spacing': 'normal'})
_HEADER_STICKY = _layout_option('header-sticky', 'Sticky Header', 'Header stays at top when scrolling', {
    'type': 'header', 'headerStyle': 'sticky', 'maxWidth': '1400px', 'spacing': 'spacious'})
_HEADER_FIXED = _layout_option('header-fixed', 'Fixed Header', 'Header always visible', {
    'type': 'header', 'headerStyle': 'fixed', 'maxWidth': '1400px', 'spacing': 'spacious'})
_SPLIT = _layout_option('split-layout', 'Split Layout', 'Two-column layout', {
    'type': 'split', 'maxWidth': '1300px', 'spacing': 'compact'})
_SINGLE_COLUMN = _layout_option('single-column', 'Single Column', 'Centered single column layout', {
    'type': 'single-column', 'maxWidth': '800px', 'spacing': 'normal'})
_ACADEMIC_HEADER = _layout_option('academic-header', 'Academic Header', 'Traditional academic layout', {
    'type': 'header', 'headerStyle': 'static', 'maxWidth': '1000px', 'spacing': 'normal'})


PORTFOLIO_TEMPLATES = [
    {
        'id': 'modern-professional',
        'name': 'Modern Professional',
        'description': 'Clean, corporate design with sidebar navigation. Perfect for business professionals and consultants.',
        'category': 'modern',
        'features': [
            'Sidebar Navigation',
            'Professional Layout',
            'Contact Form',
            'Skills Visualization',
            'Project Gallery',
            'Responsive Design',
        ],
        'preview': _preview('modern-professional'),
        'config': {
            'layout': copy.deepcopy(_SIDEBAR_LEFT['config']['layout']),
            'sections': {
                'hero': {'isVisible': True, 'order': 1, 'style': 'minimal'},
                'about': {'isVisible': True, 'order': 2, 'style': 'default'},
                'experience': {'isVisible': True, 'order': 3, 'style': 'card'},
                'skills': {'isVisible': True, 'order': 4, 'style': 'highlighted'},
                'projects': {'isVisible': True, 'order': 5, 'style': 'card'},
                'contact': {'isVisible': True, 'order': 6, 'style': 'default'},
            },
            'typography': {'headingFont': 'Inter', 'bodyFont': 'Inter', 'scale': 'normal'},
            'components': {
                'navigation': {'type': 'vertical', 'position': 'left', 'style': 'minimal'},
                'hero': {'layout': 'left', 'backgroundType': 'solid', 'showAvatar': True,
                         'showSocialLinks': True, 'animationType': 'fade'},
                'cards': {'style': 'elevated', 'borderRadius': 'medium', 'shadow': 'medium', 'hover': 'lift'},
                'buttons': {'style': 'solid', 'size': 'medium', 'borderRadius': 'medium'},
            },
            'responsive': _responsive('1200px', 'collapse', 'overlay', 'stack'),
        },
        'colorSchemes': COLOR_SCHEMES['modern'],
        'layoutOptions': [_SIDEBAR_LEFT, _SIDEBAR_RIGHT],
        'customization': _customization('modern', [
            _font('inter', 'Inter', 'Inter, sans-serif', [400, 500, 600, 700], 'sans-serif', 'Modern and clean'),
            _font('roboto', 'Roboto', 'Roboto, sans-serif', [300, 400, 500, 700], 'sans-serif', 'Professional and readable'),
        ], [_SIDEBAR_LEFT], True),
        'isPopular': True,
    },
    {
        'id': 'creative-portfolio',
        'name': 'Creative Portfolio',
        'description': 'Bold, colorful design perfect for designers, artists, and creative professionals.',
        'category': 'creative',
        'features': [
            'Vibrant Colors',
            'Animation Effects',
            'Portfolio Gallery',
            'Creative Layouts',
            'Interactive Elements',
            'Mobile Optimized',
        ],
        'preview': _preview('creative-portfolio'),
        'config': {
            'layout': copy.deepcopy(_HEADER_STICKY['config']['layout']),
            'sections': {
                'hero': {'isVisible': True, 'order': 1, 'style': 'highlighted'},
                'about': {'isVisible': True, 'order': 2, 'style': 'card'},
                'projects': {'isVisible': True, 'order': 3, 'style': 'highlighted'},
                'skills': {'isVisible': True, 'order': 4, 'style': 'default'},
                'contact': {'isVisible': True, 'order': 5, 'style': 'highlighted'},
            },
            'typography': {'headingFont': 'Poppins', 'bodyFont': 'Open Sans', 'scale': 'large'},
            'components': {
                'navigation': {'type': 'horizontal', 'position': 'top', 'style': 'pills'},
                'hero': {'layout': 'centered', 'backgroundType': 'gradient', 'showAvatar': True,
                         'showSocialLinks': True, 'animationType': 'slide'},
                'cards': {'style': 'flat', 'borderRadius': 'large', 'shadow': 'large', 'hover': 'scale'},
                'buttons': {'style': 'solid', 'size': 'large', 'borderRadius': 'full'},
            },
            'responsive': _responsive('1400px', 'collapse', 'hide', 'carousel'),
        },
        'colorSchemes': COLOR_SCHEMES['creative'],
        'layoutOptions': [_HEADER_STICKY, _HEADER_FIXED],
        'customization': _customization('creative', [
            _font('poppins', 'Poppins', 'Poppins, sans-serif', [300, 400, 500, 600, 700], 'sans-serif', 'Modern and friendly'),
            _font('montserrat', 'Montserrat', 'Montserrat, sans-serif', [300, 400, 500, 600, 700], 'sans-serif', 'Bold and creative'),
        ], [_HEADER_STICKY], True),
        'isNew': True,
    },
    {
        'id': 'developer-focus',
        'name': 'Developer Focus',
        'description': 'Code-focused layout with project emphasis. Ideal for software developers and engineers.',
        'category': 'developer',
        'features': [
            'Code Syntax Highlighting',
            'GitHub Integration',
            'Project Showcase',
            'Technical Skills',
            'Terminal Theme',
            'Developer Tools',
        ],
        'preview': _preview('developer-focus'),
        'config': {
            'layout': copy.deepcopy(_SPLIT['config']['layout']),
            'sections': {
                'hero': {'isVisible': True, 'order': 1, 'style': 'minimal'},
                'projects': {'isVisible': True, 'order': 2, 'style': 'highlighted'},
                'skills': {'isVisible': True, 'order': 3, 'style': 'card'},
                'experience': {'isVisible': True, 'order': 4, 'style': 'default'},
                'contact': {'isVisible': True, 'order': 5, 'style': 'minimal'},
            },
            'typography': {'headingFont': 'JetBrains Mono', 'bodyFont': 'Source Code Pro',
                           'monoFont': 'Fira Code', 'scale': 'normal'},
            'components': {
                'navigation': {'type': 'horizontal', 'position': 'top', 'style': 'underline'},
                'hero': {'layout': 'split', 'backgroundType': 'pattern', 'showAvatar': True,
                         'showSocialLinks': True, 'animationType': 'typewriter'},
                'cards': {'style': 'outlined', 'borderRadius': 'small', 'shadow': 'small', 'hover': 'glow'},
                'buttons': {'style': 'outline', 'size': 'medium', 'borderRadius': 'small'},
            },
            'responsive': _responsive('1300px', 'scroll', 'hide', 'grid'),
        },
        'colorSchemes': COLOR_SCHEMES['developer'],
        'layoutOptions': [_SPLIT],
        'customization': _customization('developer', [
            _font('jetbrains-mono', 'JetBrains Mono', 'JetBrains Mono, monospace', [400, 500, 600, 700], 'monospace', 'Perfect for code'),
            _font('fira-code', 'Fira Code', 'Fira Code, monospace', [300, 400, 500, 600], 'monospace', 'Developer favorite'),
        ], [], False),
        'isPopular': True,
    },
    {
        'id': 'minimal-clean',
        'name': 'Minimal Clean',
        'description': 'Simple, typography-focused design that lets your content shine. Perfect for writers and consultants.',
        'category': 'minimal',
        'features': [
            'Typography Focus',
            'Clean Design',
            'Fast Loading',
            'Accessibility',
            'Print Friendly',
            'SEO Optimized',
        ],
        'preview': _preview('minimal-clean'),
        'config': {
            'layout': copy.deepcopy(_SINGLE_COLUMN['config']['layout']),
            'sections': {
                section: {'isVisible': True, 'order': order, 'style': 'minimal'}
                for order, section in enumerate(
                    ['hero', 'about', 'experience', 'skills', 'projects', 'contact'], start=1)
            },
            'typography': {'headingFont': 'Playfair Display', 'bodyFont': 'Source Serif Pro', 'scale': 'normal'},
            'components': {
                'navigation': {'type': 'horizontal', 'position': 'top', 'style': 'minimal'},
                'hero': {'layout': 'centered', 'backgroundType': 'solid', 'showAvatar': False,
                         'showSocialLinks': True, 'animationType': 'fade'},
                'cards': {'style': 'minimal', 'borderRadius': 'none', 'shadow': 'none', 'hover': 'none'},
                'buttons': {'style': 'link', 'size': 'medium', 'borderRadius': 'none'},
            },
            'responsive': _responsive('1200px', 'stack', 'hide', 'stack'),
        },
        'colorSchemes': COLOR_SCHEMES['minimal'],
        'layoutOptions': [_SINGLE_COLUMN],
        'customization': _customization('minimal', [
            _font('playfair', 'Playfair Display', 'Playfair Display, serif', [400, 500, 600, 700], 'serif', 'Elegant and readable'),
            _font('crimson', 'Crimson Text', 'Crimson Text, serif', [400, 600], 'serif', 'Classic serif'),
        ], [], False),
    },
    {
        'id': 'academic-research',
        'name': 'Academic Research',
        'description': 'Publication and research-focused layout. Perfect for academics, researchers, and scientists.',
        'category': 'academic',
        'features': [
            'Publication List',
            'Research Focus',
            'Citation Format',
            'Academic CV',
            'Conference Papers',
            'Professional Network',
        ],
        'preview': _preview('academic-research'),
        'config': {
            'layout': copy.deepcopy(_ACADEMIC_HEADER['config']['layout']),
            'sections': {
                'hero': {'isVisible': True, 'order': 1, 'style': 'default'},
                'about': {'isVisible': True, 'order': 2, 'style': 'default'},
                'education': {'isVisible': True, 'order': 3, 'style': 'card'},
                'experience': {'isVisible': True, 'order': 4, 'style': 'default'},
                'projects': {'isVisible': True, 'order': 5, 'style': 'card'},
                'contact': {'isVisible': True, 'order': 6, 'style': 'default'},
            },
            'typography': {'headingFont': 'Crimson Text', 'bodyFont': 'Source Serif Pro', 'scale': 'normal'},
            'components': {
                'navigation': {'type': 'horizontal', 'position': 'top', 'style': 'background'},
                'hero': {'layout': 'left', 'backgroundType': 'solid', 'showAvatar': True,
                         'showSocialLinks': True, 'animationType': 'none'},
                'cards': {'style': 'outlined', 'borderRadius': 'small', 'shadow': 'small', 'hover': 'none'},
                'buttons': {'style': 'outline', 'size': 'medium', 'borderRadius': 'small'},
            },
            'responsive': _responsive('1200px', 'collapse', 'hide', 'stack'),
        },
        'colorSchemes': COLOR_SCHEMES['academic'],
        'layoutOptions': [_ACADEMIC_HEADER],
        'customization': _customization('academic', [
            _font('crimson', 'Crimson Text', 'Crimson Text, serif', [400, 600], 'serif', 'Academic standard'),
            _font('eb-garamond', 'EB Garamond', 'EB Garamond, serif', [400, 500, 600], 'serif', 'Classic elegance'),
        ], [], False),
    },
]

TEMPLATE_CATEGORIES = ['modern', 'creative', 'minimal', 'developer', 'academic']

DEFAULT_SPACING = {
    'xs': '0.25rem',
    'sm': '0.5rem',
    'md': '1rem',
    'lg': '1.5rem',
    'xl': '2rem',
}

DEFAULT_PREVIEW_DATA = {
    'personalInfo': {
        'name': 'Alex Johnson',
        'title': 'Full Stack Developer',
        'bio': 'Passionate developer with 5+ years of experience creating innovative web applications. '
               'I love turning complex problems into simple, beautiful solutions.',
        'avatar': '/preview/avatar.jpg',
        'location': 'San Francisco, CA',
        'email': 'alex@example.com',
        'phone': '+1 (555) 123-4567',
    },
    'experience': [
        {
            'title': 'Senior Full Stack Developer',
            'company': 'Tech Innovations Inc.',
            'duration': '2022 - Present',
            'description': 'Lead development of scalable web applications using React, Node.js, and cloud technologies.',
        },
        {
            'title': 'Frontend Developer',
            'company': 'Digital Solutions Co.',
            'duration': '2020 - 2022',
            'description': 'Developed responsive user interfaces and improved application performance by 40%.',
        },
        {
            'title': 'Junior Developer',
            'company': 'StartUp Labs',
            'duration': '2019 - 2020',
            'description': 'Built and maintained web applications while learning modern development practices.',
        },
    ],
    'education': [
        {'degree': 'Bachelor of Computer Science', 'school': 'University of California', 'year': '2019'},
        {'degree': 'Full Stack Web Development', 'school': 'Coding Bootcamp', 'year': '2018'},
    ],
    'skills': [
        {'name': 'JavaScript', 'level': 90, 'category': 'Programming'},
        {'name': 'React', 'level': 85, 'category': 'Frontend'},
        {'name': 'Node.js', 'level': 80, 'category': 'Backend'},
        {'name': 'TypeScript', 'level': 75, 'category': 'Programming'},
        {'name': 'Python', 'level': 70, 'category': 'Programming'},
        {'name': 'AWS', 'level': 65, 'category': 'Cloud'},
    ],
    'projects': [
        {
            'title': 'E-commerce Platform',
            'description': 'Full-stack e-commerce solution with payment integration and admin dashboard.',
            'image': '/preview/project1.jpg',
            'technologies': ['React', 'Node.js', 'MongoDB', 'Stripe'],
            'link': 'https://example.com/project1',
        },
        {
            'title': 'Task Management App',
            'description': 'Collaborative task management application with real-time updates.',
            'image': '/preview/project2.jpg',
            'technologies': ['Vue.js', 'Express', 'Socket.io', 'PostgreSQL'],
            'link': 'https://example.com/project2',
        },
        {
            'title': 'Weather Dashboard',
            'description': 'Interactive weather dashboard with data visualization and forecasting.',
            'image': '/preview/project3.jpg',
            'technologies': ['React', 'D3.js', 'Weather API', 'Chart.js'],
            'link': 'https://example.com/project3',
        },
    ],
    'socialLinks': [
        {'platform': 'GitHub', 'url': 'https://github.com/alexjohnson'},
        {'platform': 'LinkedIn', 'url': 'https://linkedin.com/in/alexjohnson'},
        {'platform': 'Twitter', 'url': 'https://twitter.com/alexjohnson'},
        {'platform': 'Portfolio', 'url': 'https://alexjohnson.dev'},
    ],
}


def get_template(template_id):
    for template in PORTFOLIO_TEMPLATES:
        if template['id'] == template_id:
            return template
    return None


def supports_skill_categories(template):
    return any('skill' in feature.lower() for feature in template.get('features', []))


def filter_templates(search=None, category=None, features=None, is_premium=None, templates=None):
    """Filter the catalog the way the theme picker does.

    ``search`` matches name, description or any feature (case-insensitive),
    ``features`` keeps templates sharing at least one of the given features.
    """
    results = list(PORTFOLIO_TEMPLATES if templates is None else templates)

    if search:
        needle = search.lower()
        results = [
            t for t in results
            if needle in t['name'].lower()
            or needle in t['description'].lower()
            or any(needle in f.lower() for f in t['features'])
        ]

    if category:
        results = [t for t in results if t['category'] == category]

    if features:
        wanted = set(features)
        results = [t for t in results if wanted.intersection(t['features'])]

    if is_premium is not None:
        results = [t for t in results if bool(t.get('isPremium', False)) == is_premium]

    return results


SORT_FIELDS = ('name', 'category', 'popularity', 'newest')


def sort_templates(templates, field='popularity', direction='desc'):
    """Return a new list ordered by ``field``; ties keep catalog order."""
    reverse = direction == 'desc'
    if field == 'name':
        key = lambda t: t['name'].lower()  # noqa: E731
    elif field == 'category':
        key = lambda t: t['category']  # noqa: E731
    elif field == 'newest':
        key = lambda t: bool(t.get('isNew'))  # noqa: E731
    else:
        key = lambda t: bool(t.get('isPopular'))  # noqa: E731
    return sorted(templates, key=key, reverse=reverse)


def theme_from_template(template, color_scheme_id=None):
    """Build a portfolio ThemeConfig from a catalog template."""
    schemes = template.get('colorSchemes') or []
    scheme = next((s for s in schemes if s['id'] == color_scheme_id), None)
    if scheme is None and schemes:
        scheme = schemes[0]

    typography = template['config']['typography']
    return {
        'id': template['id'],
        'name': template['name'],
        'colors': dict(scheme['colors']) if scheme else {},
        'fonts': {
            'heading': typography['headingFont'],
            'body': typography['bodyFont'],
            'mono': typography.get('monoFont', 'monospace'),
        },
        'spacing': dict(DEFAULT_SPACING),
        'borderRadius': '0.5rem',
    }


def default_colors(template):
    schemes = template.get('colorSchemes') or []
    return dict(schemes[0]['colors']) if schemes else {}


def default_fonts(template):
    typography = template['config']['typography']
    fonts = {'heading': typography['headingFont'], 'body': typography['bodyFont']}
    if typography.get('monoFont'):
        fonts['mono'] = typography['monoFont']
    return fonts
