"""Tests for form submission handling (no Streamlit runtime needed)."""

from datetime import date

from config.schemas import empty_harvest_draft
from dashboard.components.forms import (
    HARVEST_FORM,
    INVESTMENT_FORM,
    clear_widgets,
    draft_from_widgets,
    handle_submit,
)
from service.controller import DashboardController


def _harvest_widgets(**overrides):
    values = {
        "harvest_date": date(2024, 6, 3),
        "boat": "Sea Breeze",
        "location": "Port Clyde",
        "weight_kg": "12.5",
        "price_per_kg": "9.75",
        "notes": "",
    }
    values.update(overrides)
    return {HARVEST_FORM.key(name): value for name, value in values.items()}


def test_widget_keys_are_prefixed():
    assert HARVEST_FORM.key("boat") == "harvest_boat"
    assert INVESTMENT_FORM.key("amount_usd") == "investment_amount_usd"


def test_forms_cover_every_draft_field():
    assert tuple(f.name for f in HARVEST_FORM.fields) == tuple(empty_harvest_draft())
    assert "notes" not in HARVEST_FORM.required
    assert "notes" not in INVESTMENT_FORM.required


def test_draft_from_widgets_converts_dates_and_blanks():
    session = _harvest_widgets(notes=None)
    draft = draft_from_widgets(HARVEST_FORM, session)

    assert draft["harvest_date"] == "2024-06-03"
    assert draft["notes"] == ""
    assert draft["weight_kg"] == "12.5"


def test_draft_from_widgets_before_first_render():
    assert draft_from_widgets(INVESTMENT_FORM, {}) == {
        "investor_name": "", "amount_usd": "", "investment_date": "", "instrument": "", "notes": "",
    }


def test_missing_fields_block_submission(fake_backend):
    controller = DashboardController(fake_backend)
    session = _harvest_widgets(boat="", harvest_date=None)

    result = handle_submit(controller, HARVEST_FORM, session)

    assert result == {"status": "missing", "missing": ["Date", "Boat"]}
    assert fake_backend.posts() == []
    # what was typed is still kept in the draft
    assert controller.state.harvest_draft["location"] == "Port Clyde"


def test_successful_submit_clears_widgets(fake_backend):
    controller = DashboardController(fake_backend)
    session = _harvest_widgets()
    session["unrelated"] = 1

    result = handle_submit(controller, HARVEST_FORM, session)

    assert result == {"status": "saved"}
    assert session == {"unrelated": 1}
    assert fake_backend.posts()[0][2]["harvest_date"] == "2024-06-03"


def test_failed_submit_keeps_widgets(fake_backend):
    notes = []
    controller = DashboardController(fake_backend, notify=notes.append)
    fake_backend.fail_writes = True
    session = _harvest_widgets()
    before = dict(session)

    result = handle_submit(controller, HARVEST_FORM, session)

    assert result == {"status": "failed"}
    assert session == before
    assert notes == ["Failed to save harvest"]


def test_investment_form_submit(fake_backend):
    controller = DashboardController(fake_backend)
    session = {
        INVESTMENT_FORM.key("investor_name"): "Ada Lovelace",
        INVESTMENT_FORM.key("amount_usd"): "1000",
        INVESTMENT_FORM.key("investment_date"): date(2024, 5, 1),
        INVESTMENT_FORM.key("instrument"): "revenue share",
    }

    assert handle_submit(controller, INVESTMENT_FORM, session)["status"] == "saved"
    payload = fake_backend.posts()[0][2]
    assert payload["amount_usd"] == 1000.0
    assert payload["notes"] == ""


def test_clear_widgets_ignores_absent_keys():
    session = {"harvest_boat": "x"}
    clear_widgets(HARVEST_FORM, session)
    assert session == {}
