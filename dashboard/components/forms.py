"""
Harvest and investment entry forms.

Widget values live in ``st.session_state`` under ``<form>_<field>`` keys.
On submit they are copied into the controller's draft, required fields are
checked, and the matching controller command is dispatched. A successful
save clears the widgets; a failed one leaves them as typed.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, MutableMapping, Tuple

import streamlit as st

from config.config import HARVEST_REQUIRED, INVESTMENT_REQUIRED
from dashboard.components.layout import queue_notification
from service.controller import DashboardController
from utils.parsing import missing_required


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    kind: str = "text"      # "text" | "date" | "textarea"
    placeholder: str = ""


@dataclass(frozen=True)
class FormSpec:
    name: str
    title: str
    submit_label: str
    command: str
    update_method: str
    required: Tuple[str, ...]
    fields: Tuple[FieldSpec, ...]
    saved_message: str

    def key(self, field_name: str) -> str:
        return f"{self.name}_{field_name}"

    def label_for(self, field_name: str) -> str:
        for f in self.fields:
            if f.name == field_name:
                return f.label
        return field_name


HARVEST_FORM = FormSpec(
    name="harvest",
    title="Log Harvest",
    submit_label="Save Harvest",
    command="submit_harvest",
    update_method="update_harvest_draft",
    required=HARVEST_REQUIRED,
    fields=(
        FieldSpec("harvest_date", "Date", "date"),
        FieldSpec("boat", "Boat", placeholder="Vessel"),
        FieldSpec("location", "Location", placeholder="Area/Port"),
        FieldSpec("weight_kg", "Weight (kg)", placeholder="0.0"),
        FieldSpec("price_per_kg", "Price per kg ($)", placeholder="0.00"),
        FieldSpec("notes", "Notes", "textarea", placeholder="Optional"),
    ),
    saved_message="Harvest saved",
)

INVESTMENT_FORM = FormSpec(
    name="investment",
    title="Record Investment",
    submit_label="Save Investment",
    command="submit_investment",
    update_method="update_investment_draft",
    required=INVESTMENT_REQUIRED,
    fields=(
        FieldSpec("investor_name", "Investor", placeholder="Full name"),
        FieldSpec("amount_usd", "Amount (USD)", placeholder="0.00"),
        FieldSpec("investment_date", "Date", "date"),
        FieldSpec("instrument", "Instrument", placeholder="e.g., revenue share"),
        FieldSpec("notes", "Notes", "textarea", placeholder="Optional"),
    ),
    saved_message="Investment saved",
)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def draft_from_widgets(form: FormSpec, session: MutableMapping[str, Any]) -> Dict[str, str]:
    """Collect widget values into draft text fields (dates as ISO strings)."""
    return {f.name: _as_text(session.get(form.key(f.name))) for f in form.fields}


def clear_widgets(form: FormSpec, session: MutableMapping[str, Any]) -> None:
    # Dropping the keys makes each widget fall back to its empty default
    for f in form.fields:
        session.pop(form.key(f.name), None)


def handle_submit(
    controller: DashboardController,
    form: FormSpec,
    session: MutableMapping[str, Any],
) -> Dict[str, Any]:
    """
    Copy widgets into the draft and submit it.

    Returns:
        ``{"status": "missing", "missing": [labels]}`` when required fields
        are blank (nothing is sent), otherwise ``{"status": "saved"}`` or
        ``{"status": "failed"}``.
    """
    values = draft_from_widgets(form, session)
    getattr(controller, form.update_method)(**values)

    missing = missing_required(values, form.required)
    if missing:
        return {"status": "missing", "missing": [form.label_for(n) for n in missing]}

    if controller.dispatch(form.command):
        clear_widgets(form, session)
        return {"status": "saved"}
    return {"status": "failed"}


def _on_submit(controller: DashboardController, form: FormSpec) -> None:
    result = handle_submit(controller, form, st.session_state)
    if result["status"] == "missing":
        queue_notification(f"Please fill in: {', '.join(result['missing'])}", level="warning")
    elif result["status"] == "saved":
        queue_notification(form.saved_message, level="success")
    # failures are reported by the controller's notifier


def _render_field(form: FormSpec, f: FieldSpec) -> None:
    key = form.key(f.name)
    if f.kind == "date":
        st.date_input(f.label, value=None, key=key)
    elif f.kind == "textarea":
        st.text_area(f.label, key=key, placeholder=f.placeholder, height=80)
    else:
        st.text_input(f.label, key=key, placeholder=f.placeholder)


def render_form(controller: DashboardController, form: FormSpec) -> None:
    """Render one entry form; submission runs in the button callback."""
    st.subheader(form.title)
    with st.form(f"{form.name}_form", clear_on_submit=False):
        regular: List[FieldSpec] = [f for f in form.fields if f.kind != "textarea"]
        cols = st.columns(2)
        for idx, f in enumerate(regular):
            with cols[idx % 2]:
                _render_field(form, f)
        for f in form.fields:
            if f.kind == "textarea":
                _render_field(form, f)
        st.form_submit_button(
            form.submit_label,
            type="primary",
            on_click=_on_submit,
            args=(controller, form),
        )


def render_harvest_form(controller: DashboardController) -> None:
    render_form(controller, HARVEST_FORM)


def render_investment_form(controller: DashboardController) -> None:
    render_form(controller, INVESTMENT_FORM)
