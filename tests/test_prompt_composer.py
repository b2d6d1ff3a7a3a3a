from langchain_core.messages import HumanMessage, SystemMessage

from constants import OUTPUT_TEMPLATE
from prompt_composer import compose_prompt, format_required_clauses
from schemas import LegalSchema, SchemaResolution

LEASE_TEXT = "This lease is made between {Landlord} and Tenant. Rent is $1,200 per month."


def _resolution(titles, is_default=False):
    schema = LegalSchema.model_validate({
        "lawSummary": "Residential Tenancies Act",
        "requiredClauses": [
            {"title": t, "legalBasis": f"Section {i}", "riskIndicators": [f"{t} cue"], "draftingHints": f"{t} hint"}
            for i, t in enumerate(titles, start=1)
        ],
    })
    return SchemaResolution(legal_schema=schema, country_code="generic" if is_default else "nz", is_default=is_default)


def _joined(messages):
    return "\n".join(m.content for m in messages)


def test_system_message_fixes_output_contract():
    messages = compose_prompt(LEASE_TEXT, _resolution(["A"]))

    assert isinstance(messages[0], SystemMessage)
    assert "exactly one JSON object" in messages[0].content
    assert all(isinstance(m, HumanMessage) for m in messages[1:])


def test_required_clauses_keep_schema_order():
    text = _joined(compose_prompt(LEASE_TEXT, _resolution(["Alpha", "Bravo", "Charlie"])))

    assert text.index("1. Alpha") < text.index("2. Bravo") < text.index("3. Charlie")


def test_clause_details_are_included():
    text = format_required_clauses(_resolution(["Deposit"]).legal_schema.required_clauses)

    assert "Legal basis: Section 1" in text
    assert "Risk indicators: Deposit cue" in text
    assert "Drafting hints: Deposit hint" in text


def test_segments_order_clauses_then_lease_then_template():
    text = _joined(compose_prompt(LEASE_TEXT, _resolution(["Alpha"])))

    assert text.index("REQUIRED CLAUSES") < text.index(LEASE_TEXT) < text.index(OUTPUT_TEMPLATE)


def test_jurisdiction_variant_includes_law_summary():
    text = _joined(compose_prompt(LEASE_TEXT, _resolution(["Alpha"])))

    assert 'jurisdiction "NZ"' in text
    assert "Residential Tenancies Act" in text


def test_default_variant_has_no_jurisdiction_framing():
    messages = compose_prompt(LEASE_TEXT, _resolution(["Alpha"], is_default=True))
    text = _joined(messages)

    assert "jurisdiction" not in text.lower()
    assert "GOVERNING LAW" not in text
    assert "1. Alpha" in text
    assert "exactly one JSON object" in messages[0].content


def test_lease_text_with_braces_is_kept_verbatim():
    assert LEASE_TEXT in _joined(compose_prompt(LEASE_TEXT, _resolution(["Alpha"])))


def test_composition_is_deterministic():
    resolution = _resolution(["Alpha", "Bravo"])

    assert compose_prompt(LEASE_TEXT, resolution) == compose_prompt(LEASE_TEXT, resolution)
