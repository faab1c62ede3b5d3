# employee_payroll/business_logic/input_parsing.py
"""
Turns raw text typed by the user into validated values.

Every function returns ``Ok(value)`` or ``Err(error)``; nothing here raises for
bad input. Surrounding whitespace is ignored.
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional

from employee_payroll.business_logic.errors import FormatError, ValidationError
from employee_payroll.business_logic.result import Ok, Err, Result
from employee_payroll.constants import MSG_NAME_EMPTY, MSG_INVALID_NUMBER, MSG_INVALID_ID
import logging

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?\d+")

# Same bounds as a 32-bit int and a double
INT_MIN, INT_MAX = -2**31, 2**31 - 1
MAX_AMOUNT_EXPONENT = 308


def parse_name(text: Optional[str]) -> Result[str]:
    if text is None or not text.strip():
        return Err(ValidationError(MSG_NAME_EMPTY))
    return Ok(text.strip())


def parse_int(text: Optional[str], message: str = MSG_INVALID_NUMBER) -> Result[int]:
    """Accepts an optionally signed run of decimal digits, nothing else."""
    candidate = (text or "").strip()
    if not _INTEGER_RE.fullmatch(candidate):
        logger.debug(f"Rejected integer input: {text!r}")
        return Err(FormatError(message))
    try:
        value = int(candidate)
    except ValueError: # longer than the int string conversion limit
        return Err(FormatError(message))
    if not INT_MIN <= value <= INT_MAX:
        logger.debug(f"Integer input out of range: {value}")
        return Err(FormatError(message))
    return Ok(value)


def parse_employee_id(text: Optional[str]) -> Result[int]:
    return parse_int(text, MSG_INVALID_ID)


def parse_decimal(text: Optional[str], message: str = MSG_INVALID_NUMBER) -> Result[Decimal]:
    candidate = (text or "").strip()
    if "_" in candidate: # Decimal allows 1_000, plain numbers only here
        return Err(FormatError(message))
    try:
        amount = Decimal(candidate)
    except InvalidOperation:
        logger.debug(f"Rejected decimal input: {text!r}")
        return Err(FormatError(message))
    if not amount.is_finite() or amount.adjusted() > MAX_AMOUNT_EXPONENT: # NaN, Infinity, huge
        return Err(FormatError(message))
    return Ok(amount)


def parse_non_negative_decimal(text: Optional[str], negative_message: str) -> Result[Decimal]:
    result = parse_decimal(text)
    if isinstance(result, Ok) and result.value < 0:
        return Err(ValidationError(negative_message))
    return result


def parse_non_negative_int(text: Optional[str], negative_message: str) -> Result[int]:
    result = parse_int(text)
    if isinstance(result, Ok) and result.value < 0:
        return Err(ValidationError(negative_message))
    return result
