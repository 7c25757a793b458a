"""
Profile model for blogify.

Accounts are the host project's AUTH_USER_MODEL; Profile holds the extra
fields the dashboard shows and edits.
"""
from django.conf import settings
from django.db import models


class Profile(models.Model):
    """Per-user profile details and dashboard role."""

    ROLE_USER = "user"
    ROLE_ADMIN = "admin"
    ROLE_CHOICES = [
        (ROLE_USER, "User"),
        (ROLE_ADMIN, "Admin"),
    ]

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="blogify_profile",
    )
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default=ROLE_USER)
    phone = models.CharField(max_length=50, blank=True)
    address = models.TextField(blank=True)
    profile_picture = models.CharField(max_length=255, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Profile of {self.user}"

    @classmethod
    def for_user(cls, user):
        """Return the user's profile, creating an empty one if needed."""
        profile, _ = cls.objects.get_or_create(user=user)
        return profile

    @property
    def is_admin(self):
        return self.role == self.ROLE_ADMIN or self.user.is_staff

    def can_manage(self, other_user):
        """Check whether this profile's user may edit ``other_user``'s profile."""
        return self.user.pk == other_user.pk or self.is_admin

    def as_json(self):
        user = self.user
        return {
            "id": user.pk,
            "firstName": user.first_name,
            "lastName": user.last_name,
            "username": user.get_username(),
            "email": user.email,
            "role": self.role,
            "phone": self.phone,
            "address": self.address,
            "profilePicture": self.profile_picture or None,
            "createdAt": user.date_joined.isoformat() if user.date_joined else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
