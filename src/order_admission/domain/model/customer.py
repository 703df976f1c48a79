"""Customer record as seen by the ordering side.

Customers are owned by the customer lookup; orders only hold a reference
to the record that was resolved at admission time.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:

    id: str
    name: str
    email: str = ""
