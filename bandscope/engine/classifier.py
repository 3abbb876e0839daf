"""Transmission permission verdicts.

The verdict depends on two band attributes only: the ``transmission`` flag
and the usage category. A band that does not allow transmission is always
forbidden; otherwise the usage category decides.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from bandscope.models.band import Band
from bandscope.models.lookup import Permission, Verdict

LABELS: Dict[Permission, Tuple[str, str]] = {
    Permission.FORBIDDEN: ("Transmission forbidden", "❌"),
    Permission.ALLOWED: ("Transmission allowed", "✅"),
    Permission.LICENSE_REQUIRED: ("License required", "⚠️"),
    Permission.UNKNOWN: ("Unknown", "❓"),
}

RECEIVE_ONLY_REASON = "Reception only, transmission not permitted."
UNKNOWN_REASON = "No classification data available."
GENERIC_LICENSE_REASON = "Requires a specific license."

# A reason of None means "use the band notes, else the generic license text".
USAGE_RULES: Dict[str, Tuple[Permission, Optional[str]]] = {
    "libero": (Permission.ALLOWED, "Unrestricted, no license required."),
    "radioamatoriale": (
        Permission.LICENSE_REQUIRED,
        "Requires a valid amateur-radio license.",
    ),
    "licenziato": (Permission.LICENSE_REQUIRED, None),
    "riservato": (
        Permission.FORBIDDEN,
        "Reserved for professional/government use; private reception only.",
    ),
}


def make_verdict(permission: Permission, reason: str) -> Verdict:
    label, icon = LABELS[permission]
    return Verdict(permission=permission, label=label, icon=icon, reason=reason)


def classify(band: Band) -> Verdict:
    """Derive the transmission verdict for *band*. Never raises."""
    if not band.transmission:
        return make_verdict(Permission.FORBIDDEN, RECEIVE_ONLY_REASON)

    rule = USAGE_RULES.get((band.usage or "").strip().lower())
    if rule is None:
        return make_verdict(Permission.UNKNOWN, UNKNOWN_REASON)

    permission, reason = rule
    if reason is None:
        reason = band.notes if band.notes and band.notes.strip() else GENERIC_LICENSE_REASON
    return make_verdict(permission, reason)
