"""Request/response helpers for views that also speak JSON."""

import json

from django.core.exceptions import BadRequest
from django.http import JsonResponse, QueryDict
from django.http.multipartparser import MultiPartParserError
from django.shortcuts import redirect
from django.utils.datastructures import MultiValueDict

# Rails-style unprocessable entity
UNPROCESSABLE = 422


def wants_json(request) -> bool:
    """True when the client asked for JSON or sent a JSON body."""
    accept = request.headers.get("Accept", "")
    content_type = request.headers.get("Content-Type", "")
    return "application/json" in accept or content_type.startswith("application/json")


def request_data(request):
    """
    Return the submitted (data, files) for POST, PUT and PATCH alike.

    Django only parses form bodies for POST, so PUT/PATCH bodies (urlencoded
    or multipart) and JSON bodies are decoded here. JSON objects come back as
    plain dicts with no files.
    """
    content_type = request.headers.get("Content-Type", "")
    if content_type.startswith("application/json"):
        if not request.body:
            return {}, MultiValueDict()
        try:
            payload = json.loads(request.body)
        except json.JSONDecodeError as e:
            raise BadRequest(f"Malformed JSON body: {e}") from e
        data = payload if isinstance(payload, dict) else {}
        return data, MultiValueDict()
    if request.method == "POST":
        return request.POST, request.FILES
    if content_type.startswith("multipart/form-data"):
        try:
            return request.parse_file_upload(request.META, request)
        except MultiPartParserError as e:
            raise BadRequest(f"Malformed multipart body: {e}") from e
    return QueryDict(request.body, encoding=request.encoding), MultiValueDict()


def json_errors(errors) -> JsonResponse:
    return JsonResponse(errors, status=UNPROCESSABLE)


def see_other(to, *args, **kwargs):
    """redirect() with 303, so browsers follow updates and deletes with a GET."""
    response = redirect(to, *args, **kwargs)
    response.status_code = 303
    return response


def merge_submitted(current: dict, data, multi_fields=()) -> dict:
    """
    Overlay submitted fields on a record's current values, for PATCH.

    Fields listed in multi_fields keep every submitted value.
    """
    merged = dict(current)
    for key in data:
        if key in multi_fields and hasattr(data, "getlist"):
            merged[key] = data.getlist(key)
        else:
            merged[key] = data[key]
    return merged
