"""Errors raised by write services and handled at the view boundary."""


class ValidationFailed(Exception):
    """
    Raised when a write is rejected by validation.

    Nothing has been persisted when this is raised. ``errors`` maps field
    names to lists of messages, with ``"__all__"`` for errors that belong to
    the record as a whole. The bound form (and formset, for nested saves) are
    kept so views can re-render them with the submitted input.
    """

    def __init__(self, errors, form=None, formset=None):
        self.errors = errors
        self.form = form
        self.formset = formset
        fields = ", ".join(sorted(errors)) or "unknown"
        super().__init__(f"Validation failed: {fields}")

    @classmethod
    def from_form(cls, form):
        return cls(form_errors(form), form=form)


def form_errors(form) -> dict[str, list[str]]:
    """Flatten a bound form's errors into a plain field -> messages dict."""
    return {
        field: [str(message) for message in messages]
        for field, messages in form.errors.items()
    }
