"""
Account services: registration, login and profile management.
"""
import logging

from django.contrib.auth import get_user_model
from django.db import transaction

from ..conf import blog_settings
from ..exceptions import (
    AuthenticationError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from ..forms import LoginForm, ProfileForm, RegistrationForm, remap, validated
from ..images import delete_uploaded_file, save_profile_picture
from ..models import Profile
from ..tokens import issue_token

logger = logging.getLogger(__name__)


def register_user(data):
    """Create a user and their profile. Passwords go through Django's hashers."""
    form = RegistrationForm(remap(data, RegistrationForm.API_KEYS))
    cleaned = validated(form)

    User = get_user_model()
    with transaction.atomic():
        user = User.objects.create_user(
            username=cleaned["username"],
            email=cleaned["email"],
            password=cleaned["password"],
            first_name=cleaned["first_name"],
            last_name=cleaned["last_name"],
        )
        profile = Profile.objects.create(user=user)

    logger.info("Registered user %s", user.pk)
    return profile


def login_user(data):
    """
    Check credentials and issue a token.

    Returns:
        (Profile, token)
    """
    cleaned = validated(LoginForm(data))

    User = get_user_model()
    user = User.objects.filter(email__iexact=cleaned["email"], is_active=True).first()
    if user is None or not user.check_password(cleaned["password"]):
        raise AuthenticationError("Invalid email or password")

    logger.info("User %s logged in", user.pk)
    return Profile.for_user(user), issue_token(user)


def get_profile(pk, acting_user):
    User = get_user_model()
    user = User.objects.filter(pk=pk).first()
    if user is None:
        raise NotFoundError("User not found")
    if acting_user is not None and not Profile.for_user(acting_user).can_manage(user):
        raise PermissionDeniedError()
    return Profile.for_user(user)


def update_profile(pk, data, acting_user):
    """Apply the submitted subset of firstName, lastName, email, phone and address."""
    profile = get_profile(pk, acting_user)
    user = profile.user

    form = ProfileForm(remap(data, ProfileForm.API_KEYS), user=user)
    validated(form)
    changes = form.submitted()
    if not changes:
        return profile

    user_fields = [field for field in ("first_name", "last_name", "email") if field in changes]
    profile_fields = [field for field in ("phone", "address") if field in changes]
    with transaction.atomic():
        for field in user_fields:
            setattr(user, field, changes[field])
        if user_fields:
            user.save(update_fields=user_fields)
        for field in profile_fields:
            setattr(profile, field, changes[field])
        profile.save()

    logger.info("Updated profile of user %s", user.pk)
    return profile


def update_profile_picture(pk, upload, acting_user):
    """
    Store a new profile picture and drop the old one.

    The old file is deleted only after the profile row points at the new one.
    """
    profile = get_profile(pk, acting_user)
    if upload is None:
        raise ValidationError("No file uploaded")

    previous = profile.profile_picture
    url = save_profile_picture(upload)
    profile.profile_picture = url
    try:
        profile.save(update_fields=["profile_picture", "updated_at"])
    except Exception:
        delete_uploaded_file(url, blog_settings.PROFILE_UPLOAD_DIR)
        raise

    if previous and previous != url:
        delete_uploaded_file(previous, blog_settings.PROFILE_UPLOAD_DIR)

    logger.info("Updated profile picture of user %s", profile.user.pk)
    return profile
