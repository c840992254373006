from django import forms
from django.core.validators import RegexValidator

INPUT_CLASS = 'w-full px-4 py-2 border border-gray-300 rounded-lg focus:ring-2 focus:ring-blue-500 focus:border-transparent'

SKILL_CATEGORIES = [
    ('technical', 'Technical'),
    ('soft', 'Soft Skills'),
    ('language', 'Language'),
    ('other', 'Other'),
]

PROFICIENCY_CHOICES = [
    ('beginner', 'Beginner'),
    ('intermediate', 'Intermediate'),
    ('advanced', 'Advanced'),
    ('expert', 'Expert'),
]

VISIBILITY_CHOICES = [
    ('public', 'Public'),
    ('private', 'Private'),
    ('unlisted', 'Unlisted'),
]

MIN_SKILLS = 3
MAX_SKILLS = 20
MIN_PROJECTS = 1
MAX_PROJECTS = 10
MAX_CUSTOM_LINKS = 5

phone_validator = RegexValidator(r'^\+?[1-9]\d{0,15}$', 'Please enter a valid phone number')


def text_input(placeholder):
    return forms.TextInput(attrs={'class': INPUT_CLASS, 'placeholder': placeholder})


def url_input(placeholder):
    return forms.URLInput(attrs={'class': INPUT_CLASS, 'placeholder': placeholder})


def length_messages(label, min_length=None, max_length=None):
    messages = {'required': f'{label} is required'}
    if min_length:
        messages['min_length'] = f'{label} must be at least {min_length} characters'
    if max_length:
        messages['max_length'] = f'{label} must be less than {max_length} characters'
    return messages


class PersonalInfoForm(forms.Form):
    full_name = forms.CharField(min_length=2, max_length=100, widget=text_input('Your full name'),
                                error_messages=length_messages('Full name', 2, 100))
    professional_title = forms.CharField(min_length=2, max_length=100, widget=text_input('e.g. Full Stack Developer'),
                                         error_messages=length_messages('Professional title', 2, 100))
    bio = forms.CharField(min_length=10, max_length=500, widget=forms.Textarea(attrs={
        'class': INPUT_CLASS,
        'rows': 5,
        'placeholder': 'Tell us about yourself, your passion, and what you do...'
    }), error_messages=length_messages('Bio', 10, 500))
    location = forms.CharField(max_length=100, required=False, widget=text_input('City, Country'),
                               error_messages=length_messages('Location', max_length=100))
    email = forms.EmailField(max_length=255, widget=forms.EmailInput(attrs={
        'class': INPUT_CLASS,
        'placeholder': 'your.email@example.com'
    }), error_messages={
        'required': 'Email is required',
        'invalid': 'Please enter a valid email address',
        'max_length': 'Email must be less than 255 characters',
    })
    phone = forms.CharField(max_length=17, required=False, validators=[phone_validator],
                            widget=text_input('+15551234567'))
    profile_photo_url = forms.URLField(required=False, widget=url_input('https://example.com/photo.jpg'))


class SkillForm(forms.Form):
    name = forms.CharField(error_messages={'required': 'Skill name is required'})
    category = forms.ChoiceField(choices=SKILL_CATEGORIES)
    proficiency = forms.ChoiceField(choices=PROFICIENCY_CHOICES)


class TechnologiesField(forms.Field):
    """Accepts a list of names or a comma separated string."""

    default_error_messages = {
        'required': 'Please add at least one technology',
    }

    def to_python(self, value):
        if value in self.empty_values:
            return []
        if isinstance(value, str):
            value = value.split(',')
        return [str(v).strip() for v in value if str(v).strip()]

    def validate(self, value):
        if self.required and not value:
            raise forms.ValidationError(self.error_messages['required'], code='required')


class ProjectForm(forms.Form):
    title = forms.CharField(min_length=2, max_length=100, error_messages=length_messages('Project title', 2, 100))
    description = forms.CharField(min_length=10, max_length=300,
                                  error_messages=length_messages('Project description', 10, 300))
    technologies = TechnologiesField()
    project_url = forms.URLField(required=False, error_messages={'invalid': 'Please enter a valid URL'})
    github_url = forms.URLField(required=False, error_messages={'invalid': 'Please enter a valid GitHub URL'})
    image_url = forms.URLField(required=False, error_messages={'invalid': 'Please enter a valid URL'})
    start_date = forms.CharField(max_length=20, required=False)
    end_date = forms.CharField(max_length=20, required=False)


class CustomLinkForm(forms.Form):
    platform = forms.CharField()
    url = forms.URLField(error_messages={'invalid': 'Please enter a valid URL'})
    label = forms.CharField(required=False)


class ContactPreferencesForm(forms.Form):
    email_notifications = forms.BooleanField(required=False)
    public_profile = forms.BooleanField(required=False)
    show_email = forms.BooleanField(required=False)
    show_phone = forms.BooleanField(required=False)


class SocialLinksContactForm(forms.Form):
    linkedin = forms.URLField(required=False, widget=url_input('https://linkedin.com/in/yourusername'),
                              error_messages={'invalid': 'Please enter a valid LinkedIn URL'})
    github = forms.URLField(required=False, widget=url_input('https://github.com/yourusername'),
                            error_messages={'invalid': 'Please enter a valid GitHub URL'})
    twitter = forms.URLField(required=False, widget=url_input('https://twitter.com/yourusername'),
                             error_messages={'invalid': 'Please enter a valid Twitter/X URL'})
    website = forms.URLField(required=False, widget=url_input('https://yourwebsite.com'),
                             error_messages={'invalid': 'Please enter a valid website URL'})
    behance = forms.URLField(required=False, widget=url_input('https://behance.net/yourusername'),
                             error_messages={'invalid': 'Please enter a valid Behance URL'})
    dribbble = forms.URLField(required=False, widget=url_input('https://dribbble.com/yourusername'),
                              error_messages={'invalid': 'Please enter a valid Dribbble URL'})
    portfolio_visibility = forms.ChoiceField(choices=VISIBILITY_CHOICES, initial='public')
    terms_accepted = forms.BooleanField(error_messages={'required': 'You must accept the terms of service'})


class CountedFormSet(forms.BaseFormSet):
    """Formset whose size limits report their own messages."""

    min_message = None
    max_message = None

    def clean(self):
        super().clean()
        count = self.total_form_count()
        if self.min_num and count < self.min_num:
            raise forms.ValidationError(self.min_message, code='too_few_forms')
        if count > self.max_num:
            raise forms.ValidationError(self.max_message, code='too_many_forms')


class SkillFormSet(CountedFormSet):
    min_message = 'Please add at least 3 skills'
    max_message = 'Maximum 20 skills allowed'


class ProjectFormSet(CountedFormSet):
    min_message = 'Please add at least one project'
    max_message = 'Maximum 10 projects allowed'


class CustomLinkFormSet(CountedFormSet):
    max_message = 'Maximum 5 custom links allowed'


SkillFormSetFactory = forms.formset_factory(SkillForm, formset=SkillFormSet, extra=0,
                                            min_num=MIN_SKILLS, max_num=MAX_SKILLS)
ProjectFormSetFactory = forms.formset_factory(ProjectForm, formset=ProjectFormSet, extra=0,
                                              min_num=MIN_PROJECTS, max_num=MAX_PROJECTS)
CustomLinkFormSetFactory = forms.formset_factory(CustomLinkForm, formset=CustomLinkFormSet, extra=0,
                                                 min_num=0, max_num=MAX_CUSTOM_LINKS)


def formset_data(prefix, items):
    """Flatten a list of dicts into the POST layout a Django formset reads."""
    data = {
        f'{prefix}-TOTAL_FORMS': str(len(items)),
        f'{prefix}-INITIAL_FORMS': '0',
        f'{prefix}-MIN_NUM_FORMS': '0',
        f'{prefix}-MAX_NUM_FORMS': '1000',
    }
    for index, item in enumerate(items):
        for field, value in item.items():
            if isinstance(value, (list, tuple)):
                value = ','.join(str(v) for v in value)
            data[f'{prefix}-{index}-{field}'] = value
    return data
