"""Constants and configuration values."""

# Prompt templates. Literal braces are only ever passed in as variable values.
SYSTEM_PROMPT = (
    "You are a legal assistant specializing in residential lease agreement analysis. "
    "Respond with exactly one JSON object that matches the structure you are given. "
    "Do not include any explanation, markdown or commentary before or after the JSON."
)

JURISDICTION_PROMPT_TEMPLATE = """Analyze the following lease agreement under the law of jurisdiction "{jurisdiction}".

GOVERNING LAW:
{law_summary}

Evaluate the lease against each required clause below, in this order. For every required clause that appears in the lease, add an entry to "clauses" quoting the relevant lease text, rating its risk as "low", "medium" or "high", and citing the legal basis. Provide a "draft" with improved wording only when the risk is "medium" or "high". For every required clause the lease does not contain, add an entry to "missingClauses" with drafted clause text and your reasoning."""

GENERIC_PROMPT_TEMPLATE = """Analyze the following lease agreement using generally accepted residential tenancy principles.

Evaluate the lease against each required clause below, in this order. For every required clause that appears in the lease, add an entry to "clauses" quoting the relevant lease text, rating its risk as "low", "medium" or "high", and citing the legal basis. Provide a "draft" with improved wording only when the risk is "medium" or "high". For every required clause the lease does not contain, add an entry to "missingClauses" with drafted clause text and your reasoning."""

REQUIRED_CLAUSES_PROMPT_TEMPLATE = """REQUIRED CLAUSES:
{required_clauses}"""

LEASE_TEXT_PROMPT_TEMPLATE = """LEASE CONTENT:
---
{lease_text}
---"""

OUTPUT_FORMAT_PROMPT_TEMPLATE = """Here is the required JSON structure (use this format in your response). Fill "metadata" with facts extracted from the lease; when a value cannot be found, write "Unable to extract" followed by the field name.

{output_template}"""

OUTPUT_TEMPLATE = """{
  "clauses": [
    {
      "title": "Required clause title",
      "text": "Relevant text quoted from the lease",
      "riskLevel": "low | medium | high",
      "suggestions": ["Actionable suggestion"],
      "legalBasis": "Statute or legal principle",
      "draft": "Improved clause text (only for medium or high risk)"
    }
  ],
  "missingClauses": [
    {
      "title": "Missing clause title",
      "draft": "Suggested clause text",
      "legalBasis": "Statute or legal principle",
      "reasoning": "Why the clause is needed"
    }
  ],
  "metadata": {
    "partiesInvolved": "Description of landlord and tenant",
    "rentAndPaymentTerms": {
      "monthlyRentAmount": "Monthly rent amount",
      "dueDate": "When rent is due",
      "paymentMethods": "Accepted payment methods"
    },
    "securityDeposit": {
      "amount": "Security deposit amount",
      "conditionsForReturn": "Conditions for returning deposit"
    },
    "leaseDuration": {
      "startDate": "Lease start date",
      "endDate": "Lease end date",
      "renewalTerms": "Renewal terms"
    }
  }
}"""

GENERIC_JURISDICTION_LABEL = "generic"

# Used when a country has no catalog entry
DEFAULT_LEGAL_SCHEMA = {
    "lawSummary": "General residential tenancy principles. No jurisdiction-specific statute applies.",
    "requiredClauses": [
        {
            "title": "Termination Notice",
            "legalBasis": "General contract and tenancy law",
            "riskIndicators": [
                "No notice period stated",
                "Landlord may terminate without cause or notice",
                "Unequal notice periods for landlord and tenant",
            ],
            "draftingHints": "State a written notice period that applies equally to both parties and the permitted grounds for early termination.",
        },
        {
            "title": "Security Deposit Return",
            "legalBasis": "General contract and tenancy law",
            "riskIndicators": [
                "No deadline for returning the deposit",
                "Deposit is non-refundable",
                "Deductions allowed without itemisation",
            ],
            "draftingHints": "Specify the deposit amount, a return deadline after move-out, and that deductions are limited to itemised unpaid rent or damage beyond normal wear and tear.",
        },
    ],
}

# Fallback assessment text
FALLBACK_CLAUSE = {
    "title": "Unable to analyze clauses",
    "text": "Analysis failed",
    "riskLevel": "medium",
    "suggestions": ["Unable to provide suggestions"],
    "legalBasis": "Unable to determine legal basis",
}

FALLBACK_MISSING_CLAUSE = {
    "title": "Unable to identify missing clauses",
    "draft": "Unable to draft clause text",
    "legalBasis": "Unable to determine legal basis",
    "reasoning": "Analysis failed",
}

FALLBACK_METADATA = {
    "partiesInvolved": "Unable to extract parties information",
    "rentAndPaymentTerms": {
        "monthlyRentAmount": "Unable to extract rent amount",
        "dueDate": "Unable to extract due date",
        "paymentMethods": "Unable to extract payment methods",
    },
    "securityDeposit": {
        "amount": "Unable to extract deposit amount",
        "conditionsForReturn": "Unable to extract return conditions",
    },
    "leaseDuration": {
        "startDate": "Unable to extract start date",
        "endDate": "Unable to extract end date",
        "renewalTerms": "Unable to extract renewal terms",
    },
}
