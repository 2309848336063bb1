"""Tests for photo attachments and their file cleanup."""

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test.client import BOUNDARY, MULTIPART_CONTENT, encode_multipart
from django.urls import reverse

from conftest import GIF
from core.attachments import photo_upload_to, photo_url
from ingredients.models import Ingredient


def upload(name="shea.gif"):
    return SimpleUploadedFile(name, GIF, content_type="image/gif")


class TestUploadPath:
    def test_unique_key_per_upload(self, user):
        ingredient = Ingredient(user=user)

        first = photo_upload_to(ingredient, "Shea Butter.JPG")
        second = photo_upload_to(ingredient, "Shea Butter.JPG")

        assert first.startswith("photos/ingredient/")
        assert first.endswith(".jpg")
        assert first != second


class TestPhotoLifecycle:
    def test_upload_through_form(self, auth_client, media_root):
        auth_client.post(
            reverse("ingredient_list"),
            {"name": "Shea Butter", "category": "Butter", "photo": upload()},
        )

        ingredient = Ingredient.objects.get()
        assert ingredient.photo
        assert (media_root / ingredient.photo.name).exists()
        assert photo_url(ingredient).endswith(ingredient.photo.name)

    def test_no_photo_url_without_photo(self, user, make_ingredient):
        assert photo_url(make_ingredient(user)) is None

    def test_file_deleted_with_owner(
        self, user, make_ingredient, media_root, django_capture_on_commit_callbacks
    ):
        ingredient = make_ingredient(user, photo=upload())
        path = media_root / ingredient.photo.name
        assert path.exists()

        with django_capture_on_commit_callbacks(execute=True):
            ingredient.delete()

        assert not path.exists()

    def test_file_deleted_when_replaced(
        self, user, make_ingredient, media_root, django_capture_on_commit_callbacks
    ):
        ingredient = make_ingredient(user, photo=upload("old.gif"))
        old_path = media_root / ingredient.photo.name

        with django_capture_on_commit_callbacks(execute=True):
            ingredient.photo = upload("new.gif")
            ingredient.save()

        assert not old_path.exists()
        assert (media_root / ingredient.photo.name).exists()

    def test_file_deleted_by_cascade(
        self,
        user,
        make_ingredient,
        make_recipe,
        media_root,
        django_capture_on_commit_callbacks,
    ):
        shea = make_ingredient(user)
        recipe = make_recipe(user, [shea], photo=upload("cream.gif"))
        path = media_root / recipe.photo.name

        with django_capture_on_commit_callbacks(execute=True):
            user.delete()

        assert not path.exists()

    def test_unchanged_photo_is_kept(
        self, user, make_ingredient, media_root, django_capture_on_commit_callbacks
    ):
        ingredient = make_ingredient(user, photo=upload())
        path = media_root / ingredient.photo.name

        with django_capture_on_commit_callbacks(execute=True):
            ingredient.notes = "Refined"
            ingredient.save()

        assert path.exists()

    def test_multipart_put_replaces_photo(
        self, auth_client, user, make_ingredient, media_root
    ):
        shea = make_ingredient(user)
        body = encode_multipart(
            BOUNDARY,
            {"name": "Raw Shea Butter", "category": "Butter", "photo": upload()},
        )

        response = auth_client.put(
            reverse("ingredient_detail", args=[shea.pk]),
            body,
            content_type=MULTIPART_CONTENT,
        )

        assert response.status_code == 303
        shea.refresh_from_db()
        assert shea.name == "Raw Shea Butter"
        assert (media_root / shea.photo.name).exists()

    def test_malformed_multipart_put_is_rejected(
        self, auth_client, user, make_ingredient
    ):
        shea = make_ingredient(user)

        response = auth_client.put(
            reverse("ingredient_detail", args=[shea.pk]),
            b"no boundary here",
            content_type="multipart/form-data",
        )

        assert response.status_code == 400
        shea.refresh_from_db()
        assert shea.name == "Shea Butter"
