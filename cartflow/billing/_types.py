"""
Billing types.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from kungfu import Option, Nothing


@dataclass(frozen=True, slots=True)
class GuestCredentials:
    """
    Guest sign-in data.

    marketing_email_consent:
        Nothing()    leave consent as it is, no customer update
        Some(True)   opt in
        Some(False)  opt out (still sent)
    """

    email: str
    marketing_email_consent: Option[bool] = field(default_factory=Nothing)


__all__ = ("GuestCredentials",)
