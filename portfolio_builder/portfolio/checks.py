from django.conf import settings
from django.core.checks import Warning, register, Tags


@register(Tags.security, deploy=True)
def check_production_settings(app_configs, **kwargs):
    """Flag settings left at their development values when DEBUG is off."""
    errors = []
    if settings.DEBUG:
        return errors

    if settings.SECRET_KEY == settings.DEV_SECRET_KEY:
        errors.append(Warning(
            'DJANGO_SECRET_KEY is not set for production.',
            hint='Set DJANGO_SECRET_KEY in the environment or .env file.',
            id='portfolio.W001',
        ))
    if settings.APP_URL.startswith('http://localhost'):
        errors.append(Warning(
            'APP_URL still points at localhost.',
            hint='Set APP_URL to the public address of the site.',
            id='portfolio.W002',
        ))
    return errors
