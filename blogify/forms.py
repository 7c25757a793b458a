"""
Payload validation for the blogify API.

Request bodies use the camelCase keys of the public API; each form maps
them onto model fields before validation.
"""
from django import forms
from django.contrib.auth import get_user_model
from django.core.exceptions import NON_FIELD_ERRORS

from .conf import blog_settings
from .exceptions import ValidationError
from .models import Comment, ContactMessage, ContentItem, Tag


def form_error_message(form):
    """Flatten form errors into one human-readable message."""
    messages = []
    for field, errors in form.errors.items():
        for error in errors:
            if field == NON_FIELD_ERRORS:
                messages.append(error)
            else:
                messages.append(f"{field}: {error}")
    return " ".join(messages) or "Validation failed"


def validated(form):
    """Return cleaned data or raise ValidationError with the form's errors."""
    if not form.is_valid():
        raise ValidationError(form_error_message(form))
    return form.cleaned_data


def remap(data, keys):
    """Copy ``data`` renaming API keys to field names per ``keys``."""
    return {field: data.get(key) for key, field in keys.items() if key in data}


class ContentItemForm(forms.ModelForm):
    """Validates create and update payloads for content items."""

    tags = forms.JSONField(required=False)

    class Meta:
        model = ContentItem
        fields = ["title", "author", "excerpt", "content", "tags"]

    def clean_tags(self):
        tags = self.cleaned_data.get("tags")
        if tags in (None, ""):
            return []
        if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
            raise forms.ValidationError("Tags must be a list of strings.")
        if not all(tag.strip() for tag in tags):
            raise forms.ValidationError("Tags cannot be blank.")
        return tags


class TagForm(forms.ModelForm):
    class Meta:
        model = Tag
        fields = ["name", "description", "color"]

    def clean_name(self):
        return self.cleaned_data["name"].strip()

    def clean_color(self):
        return self.cleaned_data.get("color") or blog_settings.DEFAULT_TAG_COLOR


class CommentForm(forms.ModelForm):
    API_KEYS = {
        "postId": "post_id",
        "postType": "post_type",
        "name": "name",
        "email": "email",
        "content": "content",
    }

    class Meta:
        model = Comment
        fields = ["post_id", "post_type", "name", "email", "content"]


class ContactForm(forms.ModelForm):
    class Meta:
        model = ContactMessage
        fields = ["fullname", "email", "message"]


class RegistrationForm(forms.Form):
    API_KEYS = {
        "firstName": "first_name",
        "lastName": "last_name",
        "username": "username",
        "email": "email",
        "password": "password",
    }

    first_name = forms.CharField(max_length=150)
    last_name = forms.CharField(max_length=150)
    username = forms.CharField(max_length=150)
    email = forms.EmailField()
    password = forms.CharField(strip=False)

    def clean_password(self):
        password = self.cleaned_data["password"]
        if len(password) < blog_settings.PASSWORD_MIN_LENGTH:
            raise forms.ValidationError(
                f"Password must be at least {blog_settings.PASSWORD_MIN_LENGTH} characters"
            )
        return password

    def clean(self):
        cleaned = super().clean()
        User = get_user_model()
        email = cleaned.get("email")
        username = cleaned.get("username")
        if email and User.objects.filter(email__iexact=email).exists():
            raise forms.ValidationError("Email already in use")
        if username and User.objects.filter(**{User.USERNAME_FIELD: username}).exists():
            raise forms.ValidationError("Username already taken")
        return cleaned


class LoginForm(forms.Form):
    email = forms.EmailField()
    password = forms.CharField(strip=False)


class ProfileForm(forms.Form):
    """Partial profile update; only submitted keys are validated and applied."""

    API_KEYS = {
        "firstName": "first_name",
        "lastName": "last_name",
        "email": "email",
        "phone": "phone",
        "address": "address",
    }

    first_name = forms.CharField(max_length=150, required=False)
    last_name = forms.CharField(max_length=150, required=False)
    email = forms.EmailField(required=False)
    phone = forms.CharField(max_length=50, required=False)
    address = forms.CharField(required=False)

    def __init__(self, *args, user=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user = user

    def clean_email(self):
        email = self.cleaned_data.get("email")
        if "email" in self.data and not email:
            raise forms.ValidationError("Email cannot be empty")
        if email:
            User = get_user_model()
            taken = User.objects.filter(email__iexact=email).exclude(pk=self.user.pk)
            if taken.exists():
                raise forms.ValidationError("Email already in use")
        return email

    def submitted(self):
        """Return cleaned values for the keys present in the payload."""
        return {
            field: value
            for field, value in self.cleaned_data.items()
            if field in self.data
        }
