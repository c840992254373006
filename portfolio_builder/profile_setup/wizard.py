"""
Four-step profile wizard.

Each step validates its payload with Django forms and stores the cleaned,
camelCased data in the draft. Steps must be completed in order; once all of
them are done the draft can be turned into a portfolio.
"""

import logging
import re

from portfolio.catalog import DEFAULT_TEMPLATE_ID, get_template, theme_from_template
from portfolio.storage import generate_id, now_iso
from portfolio.validation import round_half_up

from .forms import (
    ContactPreferencesForm,
    CustomLinkFormSetFactory,
    PersonalInfoForm,
    ProjectFormSetFactory,
    SkillFormSetFactory,
    SocialLinksContactForm,
    formset_data,
)

logger = logging.getLogger(__name__)

STEPS = [
    {
        'id': 'personal-info',
        'key': 'personalInfo',
        'title': 'Personal Information',
        'description': 'Tell us about yourself and add a professional photo',
    },
    {
        'id': 'skills-expertise',
        'key': 'skillsExpertise',
        'title': 'Skills & Expertise',
        'description': 'Showcase your skills and areas of expertise',
    },
    {
        'id': 'projects-portfolio',
        'key': 'projectsPortfolio',
        'title': 'Projects & Portfolio',
        'description': 'Add your best projects and work samples',
    },
    {
        'id': 'social-contact',
        'key': 'socialLinksContact',
        'title': 'Social Links & Contact',
        'description': 'Connect your social profiles and set contact preferences',
    },
]

STEP_IDS = [step['id'] for step in STEPS]

SOCIAL_PLATFORMS = ['linkedin', 'github', 'twitter', 'website', 'behance', 'dribbble']


class StepNotFound(Exception):
    pass


class StepLocked(Exception):
    def __init__(self, step_id, missing):
        super().__init__(f"Complete {', '.join(missing)} before {step_id}")
        self.step_id = step_id
        self.missing = missing


class WizardIncomplete(Exception):
    def __init__(self, missing):
        super().__init__(f"Incomplete steps: {', '.join(missing)}")
        self.missing = missing


class StepValidationError(Exception):
    def __init__(self, errors):
        super().__init__("Step validation failed")
        self.errors = errors


def snake_case(name):
    return re.sub(r'(?<!^)(?=[A-Z])', '_', name).lower()


def camel_case(name):
    head, *rest = name.split('_')
    return head + ''.join(part.title() for part in rest)


def to_form_data(payload):
    return {snake_case(k): v for k, v in (payload or {}).items()}


def to_draft_data(cleaned):
    return {camel_case(k): v for k, v in cleaned.items()}


def form_errors(form):
    """Field errors as ``{camelCaseField: [message, ...]}``."""
    errors = {}
    for field, field_errors in form.errors.get_json_data().items():
        key = field if field == '__all__' else camel_case(field)
        errors[key] = [e['message'] for e in field_errors]
    return errors


def _formset_errors(formset):
    errors = {}
    non_form = formset.non_form_errors().get_json_data()
    if non_form:
        errors['__all__'] = [e['message'] for e in non_form]
    for index, form in enumerate(formset.forms):
        if form.errors:
            errors[str(index)] = form_errors(form)
    return errors


def _list_payload(payload, key):
    items = (payload or {}).get(key) or []
    if not isinstance(items, list):
        raise StepValidationError({key: ['Expected a list']})
    return [to_form_data(item) if isinstance(item, dict) else {} for item in items]


def clean_personal_info(payload):
    form = PersonalInfoForm(to_form_data(payload))
    if not form.is_valid():
        raise StepValidationError(form_errors(form))
    return to_draft_data(form.cleaned_data)


def clean_skills(payload):
    formset = SkillFormSetFactory(formset_data('skills', _list_payload(payload, 'skills')), prefix='skills')
    if not formset.is_valid():
        raise StepValidationError({'skills': _formset_errors(formset)})
    return {'skills': [
        {'id': generate_id(), **to_draft_data(form.cleaned_data)} for form in formset.forms if form.cleaned_data
    ]}


def clean_projects(payload):
    formset = ProjectFormSetFactory(formset_data('projects', _list_payload(payload, 'projects')), prefix='projects')
    if not formset.is_valid():
        raise StepValidationError({'projects': _formset_errors(formset)})
    return {'projects': [
        {'id': generate_id(), **to_draft_data(form.cleaned_data), 'order': order}
        for order, form in enumerate(f for f in formset.forms if f.cleaned_data)
    ]}


def clean_social_contact(payload):
    payload = payload or {}
    errors = {}

    form = SocialLinksContactForm(to_form_data(payload))
    if not form.is_valid():
        errors.update(form_errors(form))

    links = CustomLinkFormSetFactory(formset_data('customLinks', _list_payload(payload, 'customLinks')),
                                     prefix='customLinks')
    if not links.is_valid():
        errors['customLinks'] = _formset_errors(links)

    preferences = ContactPreferencesForm(to_form_data(payload.get('contactPreferences')))
    preferences.is_valid()

    if errors:
        raise StepValidationError(errors)

    data = to_draft_data(form.cleaned_data)
    data['customLinks'] = [
        {'id': generate_id(), **to_draft_data(link.cleaned_data)} for link in links.forms if link.cleaned_data
    ]
    data['contactPreferences'] = to_draft_data(preferences.cleaned_data)
    return data


STEP_CLEANERS = {
    'personal-info': clean_personal_info,
    'skills-expertise': clean_skills,
    'projects-portfolio': clean_projects,
    'social-contact': clean_social_contact,
}


def completed_steps(draft):
    if not isinstance(draft, dict):
        return []
    steps = draft.get('completedSteps')
    if not isinstance(steps, list):
        return []
    done = {s for s in steps if isinstance(s, str)}
    # a step only counts once its data is in the draft
    return [step['id'] for step in STEPS if step['id'] in done and isinstance(draft.get(step['key']), dict)]


def current_step_index(draft):
    done = completed_steps(draft)
    for index, step_id in enumerate(STEP_IDS):
        if step_id not in done:
            return index
    return len(STEPS) - 1


def wizard_state(draft):
    done = completed_steps(draft)
    index = current_step_index(draft)
    return {
        'steps': [
            {
                'id': step['id'],
                'title': step['title'],
                'description': step['description'],
                'isCompleted': step['id'] in done,
            }
            for step in STEPS
        ],
        'currentStep': index,
        'currentStepId': STEP_IDS[index],
        'progress': round_half_up((index + 1) / len(STEPS) * 100),
        'isComplete': len(done) == len(STEPS),
        'draft': draft,
    }


def submit_step(draft, step_id, payload):
    """Validate one step and return the updated draft."""
    if step_id not in STEP_CLEANERS:
        raise StepNotFound(step_id)

    done = completed_steps(draft)
    missing = [s for s in STEP_IDS[:STEP_IDS.index(step_id)] if s not in done]
    if missing:
        raise StepLocked(step_id, missing)

    data = STEP_CLEANERS[step_id](payload)

    draft = dict(draft) if isinstance(draft, dict) else {}
    draft[STEPS[STEP_IDS.index(step_id)]['key']] = data
    draft['completedSteps'] = [s for s in STEP_IDS if s in done or s == step_id]
    draft['updatedAt'] = now_iso()
    logger.debug("Wizard step %s saved", step_id)
    return draft


def _section(section_type, title, order, content):
    return {
        'id': f'{section_type}-{generate_id()}',
        'type': section_type,
        'title': title,
        'content': content,
        'order': order,
        'isVisible': True,
        'settings': {},
    }


def social_links_from(contact):
    links = [
        {'platform': platform, 'url': contact[platform], 'isVisible': True}
        for platform in SOCIAL_PLATFORMS
        if contact.get(platform)
    ]
    links += [
        {'platform': link['platform'], 'url': link['url'], 'isVisible': True}
        for link in contact.get('customLinks') or []
    ]
    return links


def build_portfolio(draft, template_id=DEFAULT_TEMPLATE_ID):
    """Turn a completed wizard draft into a portfolio object."""
    missing = [s for s in STEP_IDS if s not in completed_steps(draft)]
    if missing:
        raise WizardIncomplete(missing)

    personal = draft['personalInfo']
    skills = draft['skillsExpertise']['skills']
    projects = draft['projectsPortfolio']['projects']
    contact = draft['socialLinksContact']
    preferences = contact.get('contactPreferences') or {}

    hero = {'name': personal['fullName'], 'title': personal['professionalTitle']}
    if personal.get('profilePhotoUrl'):
        hero['avatar'] = personal['profilePhotoUrl']

    contact_content = {'email': personal['email']}
    if personal.get('location'):
        contact_content['location'] = personal['location']
    if personal.get('phone') and preferences.get('showPhone'):
        contact_content['phone'] = personal['phone']

    sections = [
        _section('hero', 'Hero', 0, hero),
        _section('about', 'About', 1, {'bio': personal['bio']}),
        _section('skills', 'Skills', 2, {'items': [
            {'name': s['name'], 'category': s['category'], 'proficiency': s['proficiency']}
            for s in skills
        ]}),
        _section('projects', 'Projects', 3, {'items': [
            {
                'title': p['title'],
                'description': p['description'],
                'technologies': p['technologies'],
                'projectUrl': p.get('projectUrl') or '',
                'githubUrl': p.get('githubUrl') or '',
                'image': p.get('imageUrl') or '',
                'startDate': p.get('startDate') or '',
                'endDate': p.get('endDate') or '',
            }
            for p in projects
        ]}),
        _section('contact', 'Contact', 4, contact_content),
    ]

    title = f"{personal['fullName']}'s Portfolio"
    timestamp = now_iso()
    return {
        'id': generate_id(),
        'title': title,
        'description': personal['bio'],
        'theme': theme_from_template(get_template(template_id)),
        'sections': sections,
        'settings': {
            'isPublic': contact.get('portfolioVisibility') == 'public',
            'seoTitle': title,
            'seoDescription': personal['bio'],
            'socialLinks': social_links_from(contact),
        },
        'createdAt': timestamp,
        'updatedAt': timestamp,
    }
