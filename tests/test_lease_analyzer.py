import pytest

from ai_processor import GenerationError
from document_loader import ExtractionError
from lease_analyzer import LeaseAnalyzer, document_identity
from result_cache import generate_cache_key

from conftest import FakeInvoker

LEASE_TEXT = "RENTAL AGREEMENT between Asha Rao (Landlord) and Vikram Mehta (Tenant)..."


@pytest.fixture
def analyzer(registry, fake_invoker, cache):
    return LeaseAnalyzer(registry, fake_invoker, cache)


def test_second_call_is_served_from_cache(analyzer, fake_invoker):
    first = analyzer.analyze(LEASE_TEXT, "in")
    second = analyzer.analyze(LEASE_TEXT, "in")

    assert len(fake_invoker.calls) == 1
    assert second == first


def test_cache_expires_after_ttl(analyzer, fake_invoker, clock):
    analyzer.analyze(LEASE_TEXT, "in")
    clock.advance(61)
    analyzer.analyze(LEASE_TEXT, "in")

    assert len(fake_invoker.calls) == 2


def test_jurisdictions_are_cached_separately(analyzer, fake_invoker):
    analyzer.analyze(LEASE_TEXT, "in")
    analyzer.analyze(LEASE_TEXT, "us")
    analyzer.analyze(LEASE_TEXT, "us", "ca")

    assert len(fake_invoker.calls) == 3


def test_document_id_is_used_for_cache_key(analyzer, cache):
    analyzer.analyze(LEASE_TEXT, "in", document_id="https://files/lease.pdf")

    assert cache.get(generate_cache_key("https://files/lease.pdf", "in")) is not None
    assert cache.get(generate_cache_key(document_identity(LEASE_TEXT), "in")) is None


def test_known_country_uses_jurisdiction_prompt(analyzer, fake_invoker):
    analyzer.analyze(LEASE_TEXT, "IN")

    text = "\n".join(m.content for m in fake_invoker.calls[0])
    assert 'jurisdiction "IN"' in text
    assert "Model Tenancy Act" in text


def test_unknown_country_uses_default_schema(analyzer, fake_invoker):
    result = analyzer.analyze(LEASE_TEXT, "xx")

    text = "\n".join(m.content for m in fake_invoker.calls[0])
    assert "GOVERNING LAW" not in text
    assert "1. Termination Notice" in text
    assert "2. Security Deposit Return" in text
    assert result.metadata.parties_involved.startswith("Asha Rao")


def test_generation_error_propagates_and_is_not_cached(registry, cache, failing_invoker):
    analyzer = LeaseAnalyzer(registry, failing_invoker, cache)

    with pytest.raises(GenerationError):
        analyzer.analyze(LEASE_TEXT, "in")
    assert len(cache) == 0


def test_malformed_output_returns_fallback_without_caching(registry, cache):
    invoker = FakeInvoker(output="I could not read the lease.")
    analyzer = LeaseAnalyzer(registry, invoker, cache)

    result = analyzer.analyze(LEASE_TEXT, "in")

    assert result.clauses[0].title == "Unable to analyze clauses"
    assert len(cache) == 0


@pytest.mark.parametrize("text", ["", "   \n\t"])
def test_empty_text_is_an_extraction_error(analyzer, fake_invoker, text):
    with pytest.raises(ExtractionError):
        analyzer.analyze(text, "in")
    assert fake_invoker.calls == []


@pytest.mark.parametrize("country_code", ["", "  ", None, 42])
def test_malformed_country_code_uses_default_schema(analyzer, fake_invoker, country_code):
    result = analyzer.analyze(LEASE_TEXT, country_code)

    text = "\n".join(m.content for m in fake_invoker.calls[0])
    assert "GOVERNING LAW" not in text
    assert "1. Termination Notice" in text
    assert result.metadata.parties_involved.startswith("Asha Rao")


def test_malformed_region_code_is_dropped(analyzer, fake_invoker, cache):
    analyzer.analyze(LEASE_TEXT, "in", 7)

    text = "\n".join(m.content for m in fake_invoker.calls[0])
    assert 'jurisdiction "IN"' in text
    assert cache.get(generate_cache_key(document_identity(LEASE_TEXT), "in")) is not None
