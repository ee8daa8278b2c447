"""
Add-customer form controller.

Holds the draft being edited and the pending flag, and runs a submission
against three collaborators:

- create: callable taking the draft (the customers API create call)
- notifier: object with notify_success(text) / notify_error(text)
- navigate: zero-argument callable that moves the user to the listing

KNOWN BEHAVIOR: after a failed submission `pending` stays True, so the
submit button remains disabled until the form is opened again. Set
`reset_pending_on_failure=True` (CUSTOMER_FORM_RESET_PENDING_ON_FAILURE=1)
to re-enable it instead.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol

from app.crm.modules.customers.errors import classify_failure, failure_messages
from app.crm.modules.customers.models import CustomerDraft

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Customer added successfully!"
LISTING_PATH = "/customers"


class Notifier(Protocol):
    def notify_success(self, text: str) -> None: ...

    def notify_error(self, text: str) -> None: ...


@dataclass(frozen=True)
class SubmitOutcome:
    ok: bool
    messages: tuple[str, ...] = ()
    created: dict[str, Any] | None = None


@dataclass
class CustomerCreationForm:
    create: Callable[[CustomerDraft], Any]
    notifier: Notifier
    navigate: Callable[[], Any]
    draft: CustomerDraft = field(default_factory=CustomerDraft)
    pending: bool = False
    reset_pending_on_failure: bool = False

    @property
    def submit_disabled(self) -> bool:
        return self.pending

    @property
    def submit_label(self) -> str:
        return "Adding..." if self.pending else "Add Customer"

    def update_field(self, name: str, value: str | None) -> CustomerDraft:
        self.draft = self.draft.with_field(name, value)
        return self.draft

    def submit(self, draft: CustomerDraft | None = None) -> SubmitOutcome:
        draft = self.draft if draft is None else draft
        self.pending = True
        try:
            created = self.create(draft)
        except Exception as e:
            logger.error("Error adding customer: %r", e)
            messages = failure_messages(classify_failure(e))
            for text in messages:
                self.notifier.notify_error(text)
            if self.reset_pending_on_failure:
                self.pending = False
            return SubmitOutcome(ok=False, messages=tuple(messages))

        created = created if isinstance(created, dict) else None
        logger.info("Customer added (id=%s)", (created or {}).get("id"))
        self.notifier.notify_success(SUCCESS_MESSAGE)
        self.navigate()
        return SubmitOutcome(ok=True, messages=(SUCCESS_MESSAGE,), created=created)
