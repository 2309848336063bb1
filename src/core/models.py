from django.db import models


class OwnedQuerySet(models.QuerySet):
    """QuerySet for rows that belong to a single user."""

    def for_user(self, user):
        """
        Return the rows owned by user.

        Anonymous or missing users get an empty queryset.
        """
        if user is None or not user.is_authenticated:
            return self.none()
        return self.filter(user=user)


class OwnedModel(models.Model):
    """
    Base for user-owned rows.

    Concrete models declare their own ``user`` foreign key so each gets a
    readable reverse accessor (``user.ingredients``, ``user.batches`` ...).
    """

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = OwnedQuerySet.as_manager()

    class Meta:
        abstract = True
