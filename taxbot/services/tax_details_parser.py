"""Parser for the "key: value" tax details a user submits."""

from __future__ import annotations

import re
import string
from dataclasses import dataclass

REQUIRED_FIELDS = ("hours", "rate", "state", "county", "city")
NUMERIC_FIELDS = ("hours", "rate")

_LABEL = re.compile(r"\b(hours|rate|state|county|city)\s*:\s*", re.IGNORECASE)
_SEPARATOR = re.compile(r"[,;\n]")
_NUMBER = re.compile(r"\d+\.?\d*")
_EDGE_CHARACTERS = string.punctuation + string.whitespace


class TaxDetailsError(ValueError):
    """Raised when an utterance does not carry usable tax details."""


@dataclass(frozen=True, slots=True)
class TaxDetails:
    """Work and location details needed for an estimate."""

    hours: float
    rate: float
    state: str
    county: str
    city: str


def parse_tax_details(text: str) -> TaxDetails:
    """Parse ``hours: 40, rate: 35, state: NY, county: Kings, city: NYC``.

    Labels are case-insensitive and may come in any order, with any text
    between them. A value ends at the next comma, semicolon or newline, or
    at the next label. Hours and rate use the number the value starts with,
    so ``hours: 40 hrs`` reads as 40.
    """
    fields = _split_fields(text)

    missing = [name for name in REQUIRED_FIELDS if not fields.get(name)]
    if missing:
        raise TaxDetailsError(f"Missing tax details: {', '.join(missing)}.")

    numbers = {name: _parse_number(name, fields[name]) for name in NUMERIC_FIELDS}
    return TaxDetails(
        hours=numbers["hours"],
        rate=numbers["rate"],
        state=fields["state"],
        county=fields["county"],
        city=fields["city"],
    )


def _split_fields(text: str) -> dict[str, str]:
    fields: dict[str, str] = {}
    labels = list(_LABEL.finditer(text))
    for index, label in enumerate(labels):
        has_next_label = index + 1 < len(labels)
        value = text[label.end():labels[index + 1].start() if has_next_label else len(text)]

        separator = _SEPARATOR.search(value)
        if separator is not None:
            value = value[:separator.start()]
        elif has_next_label:
            # Free text runs into the next label: only the first word belongs to this one.
            words = value.split()
            value = words[0] if words else ""

        name = label.group(1).lower()
        if name in NUMERIC_FIELDS:
            fields[name] = value.strip()
        else:
            fields[name] = " ".join(value.split()).strip(_EDGE_CHARACTERS)
    return fields


def _parse_number(name: str, value: str) -> float:
    candidate = value.lstrip("$").strip() if name == "rate" else value
    match = _NUMBER.match(candidate)
    if match is None:
        raise TaxDetailsError(f"Field '{name}' must start with a number, got '{value}'.")
    return float(match.group())
