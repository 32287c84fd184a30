"""Live TOTP codes for vault accounts with 2FA set up."""

import logging
import re
import time
from dataclasses import dataclass

import pyotp

from config import settings

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s")


@dataclass
class TotpCode:
    token: str
    remaining: int  # seconds left in the current window
    progress: float  # remaining as a percentage of the period, for the countdown bar


def clean_secret(secret: str | None) -> str:
    """Setup keys are often pasted in spaced groups ("jbsw y3dp ..."); store them compact."""
    if not secret:
        return ""
    return _WHITESPACE.sub("", secret).upper()


def current_code(
    secret: str | None,
    now: float | None = None,
    period: int | None = None,
    digits: int | None = None,
) -> TotpCode | None:
    """Return the code valid at ``now`` (epoch seconds), or None for a missing/invalid secret."""
    secret = clean_secret(secret)
    if not secret:
        return None

    period = period or settings.totp_period
    digits = digits or settings.totp_digits
    now = time.time() if now is None else now

    try:
        totp = pyotp.TOTP(secret, digits=digits, interval=period)
        token = totp.at(int(now))
    except ValueError as e:
        # binascii.Error (bad Base32) is a ValueError
        logger.debug("Invalid TOTP secret: %s", e)
        return None

    epoch = int(now)
    remaining = period - (epoch % period)
    return TotpCode(token=token, remaining=remaining, progress=remaining / period * 100)
