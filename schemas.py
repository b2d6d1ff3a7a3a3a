"""Pydantic models for data validation and structure."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads and writes the camelCase wire names."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Jurisdiction catalog ---

class RequiredClause(CamelModel):
    """A clause a compliant lease should contain."""
    title: str = Field(description="Clause title, unique within a schema.")
    legal_basis: str = Field(description="Statute or doctrine that requires the clause.")
    risk_indicators: List[str] = Field(default_factory=list, description="Cues that signal a risky version of the clause.")
    drafting_hints: str = Field(default="", description="Guidance for drafting a compliant version.")


class LegalSchema(CamelModel):
    """Legal requirements for one jurisdiction."""
    law_summary: str
    required_clauses: List[RequiredClause]

    @field_validator("required_clauses")
    @classmethod
    def _check_clauses(cls, clauses: List[RequiredClause]) -> List[RequiredClause]:
        if not clauses:
            raise ValueError("a legal schema needs at least one required clause")
        seen = set()
        for clause in clauses:
            if clause.title in seen:
                raise ValueError(f"duplicate required clause title: {clause.title!r}")
            seen.add(clause.title)
        return clauses


class Jurisdiction(CamelModel):
    country_code: str
    region_code: Optional[str] = None

    @field_validator("country_code")
    @classmethod
    def _normalize_country(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("country code must not be empty")
        return value

    @field_validator("region_code")
    @classmethod
    def _normalize_region(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip().lower()
        return value or None


class SchemaResolution(BaseModel):
    """Outcome of resolving a jurisdiction. `is_default` marks the generic fallback schema."""
    model_config = ConfigDict(frozen=True)

    legal_schema: LegalSchema
    country_code: str
    is_default: bool = False


# --- Assessment ---

class ClauseWithAdvice(CamelModel):
    """A required clause evaluated against the lease."""
    title: str
    text: str
    risk_level: Literal["low", "medium", "high"]
    suggestions: List[str]
    legal_basis: str
    draft: Optional[str] = Field(default=None, description="Improved wording, only for medium or high risk.")

    @field_validator("risk_level", mode="before")
    @classmethod
    def _lower_risk(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @model_validator(mode="after")
    def _drop_low_risk_draft(self):
        if self.risk_level == "low":
            self.draft = None
        return self


class SuggestedClause(CamelModel):
    """A required clause missing from the lease, with drafted text."""
    title: str
    draft: str
    legal_basis: str
    reasoning: str


class RentAndPaymentTerms(CamelModel):
    monthly_rent_amount: str
    due_date: str
    payment_methods: str


class SecurityDeposit(CamelModel):
    amount: str
    conditions_for_return: str


class LeaseDuration(CamelModel):
    start_date: str
    end_date: str
    renewal_terms: str


class LeaseMetadata(CamelModel):
    parties_involved: str
    rent_and_payment_terms: RentAndPaymentTerms
    security_deposit: SecurityDeposit
    lease_duration: LeaseDuration


class LeaseAnalysisResponse(CamelModel):
    """Full structured output of one analysis run."""
    clauses: List[ClauseWithAdvice]
    missing_clauses: List[SuggestedClause]
    metadata: LeaseMetadata

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)
