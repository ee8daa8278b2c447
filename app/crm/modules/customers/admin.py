from __future__ import annotations

from flask import Blueprint, current_app, redirect, render_template, request, url_for

from app.crm.modules.customers.api_client import CustomersApiClient
from app.crm.modules.customers.errors import classify_failure, failure_messages
from app.crm.modules.customers.models import EDITABLE_FIELDS, CustomerDraft
from app.crm.modules.customers.service import CustomerCreationForm
from app.crm.notifications import FlashNotifier

bp = Blueprint("customers", __name__)

# (input name, input type, placeholder) per form section
FORM_SECTIONS = (
    (
        "Personal Details",
        (
            ("firstName", "text", "First name"),
            ("lastName", "text", "Last name"),
            ("email", "email", "Email"),
            ("phone", "text", "Phone"),
        ),
    ),
    (
        "Address",
        (
            ("address", "text", "Home address"),
            ("city", "text", "City"),
        ),
    ),
)


class _RedirectNavigator:
    """Records where the form asked to go; the view turns it into a redirect."""

    def __init__(self, endpoint: str):
        self.endpoint = endpoint
        self.location: str | None = None

    def __call__(self) -> None:
        self.location = url_for(self.endpoint)


def _api() -> CustomersApiClient:
    return current_app.extensions["customers_api"]


def _new_form(navigate: _RedirectNavigator | None = None) -> CustomerCreationForm:
    return CustomerCreationForm(
        create=_api().create_customer,
        notifier=FlashNotifier(),
        navigate=navigate or _RedirectNavigator("customers.customers_list"),
        reset_pending_on_failure=bool(current_app.config.get("CUSTOMER_FORM_RESET_PENDING_ON_FAILURE")),
    )


def _render_form(form: CustomerCreationForm):
    return render_template(
        "customers/new.html",
        sections=FORM_SECTIONS,
        values=form.draft.to_payload(),
        submit_disabled=form.submit_disabled,
        submit_label=form.submit_label,
    )


@bp.get("/customers")
def customers_list():
    customers: list[CustomerDraft] = []
    try:
        rows = _api().list_customers()
        customers = [CustomerDraft.from_mapping(row) for row in rows]
    except Exception as e:
        current_app.logger.error("Error loading customers: %r", e)
        notifier = FlashNotifier()
        for text in failure_messages(classify_failure(e)):
            notifier.notify_error(text)
    return render_template("customers/list.html", customers=customers)


@bp.get("/customers/new")
def customers_new_get():
    return _render_form(_new_form())


@bp.post("/customers/new")
def customers_new_post():
    navigator = _RedirectNavigator("customers.customers_list")
    form = _new_form(navigator)
    for name in EDITABLE_FIELDS:
        form.update_field(name, request.form.get(name, ""))

    outcome = form.submit(form.draft)
    if outcome.ok and navigator.location:
        return redirect(navigator.location)
    return _render_form(form)
