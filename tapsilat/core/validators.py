"""İstek öncesi girdi doğrulama: GSM, e-posta, tutar, taksit sayısı, TC Kimlik No.

Tüm fonksiyonlar saf ve durumsuzdur; hatalı girdide ValidationError alt tipi fırlatır.
"""
import re
from decimal import Decimal, InvalidOperation

from .errors import (
    InvalidAmount,
    InvalidEmail,
    InvalidGsm,
    InvalidIdentityNumber,
    InvalidInstallmentCount,
)

# Sırası önemli: "90" önce denenir, sonra tek "0"
GSM_PREFIXES = ("90", "0")
GSM_SEPARATORS = re.compile(r"[\s\-().]")
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
VALID_INSTALLMENTS = frozenset(range(1, 13))
MAX_AMOUNT_DECIMALS = 2


def validate_gsm(gsm: str) -> str:
    """
    Türk cep numarasını doğrular ve 90XXXXXXXXXX biçimine çevirir.
    Kabul: +90XXXXXXXXXX, 90XXXXXXXXXX, 0XXXXXXXXXX, XXXXXXXXXX (boşluk/tire olabilir).
    """
    if not isinstance(gsm, str):
        raise InvalidGsm("GSM number must be a string", gsm)
    compact = GSM_SEPARATORS.sub("", gsm)
    if compact.startswith("+"):
        compact = compact[1:]
    subscriber = compact
    for prefix in GSM_PREFIXES:
        if compact.startswith(prefix):
            subscriber = compact[len(prefix):]
            break

    if len(subscriber) != 10:
        raise InvalidGsm("GSM number must be 10 digits long", gsm)
    if not subscriber.startswith("5"):
        raise InvalidGsm("Turkish mobile numbers must start with 5", gsm)
    # str.isdigit Unicode rakamları da kabul eder
    if not (subscriber.isascii() and subscriber.isdigit()):
        raise InvalidGsm("GSM number must contain only digits", gsm)
    return f"90{subscriber}"


def validate_gsm_number(gsm: str) -> str:
    return validate_gsm(gsm)


def validate_email(email: str) -> None:
    if not isinstance(email, str) or not EMAIL_RE.match(email):
        raise InvalidEmail("Invalid email format", email)


def _to_decimal(amount) -> Decimal:
    if isinstance(amount, bool):
        raise InvalidAmount("Amount must be a number", amount)
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, float):
        # repr en kısa gösterimi verir: 99.99 -> "99.99"
        return Decimal(repr(amount))
    if isinstance(amount, (int, str)):
        try:
            return Decimal(amount.strip() if isinstance(amount, str) else amount)
        except InvalidOperation:
            raise InvalidAmount("Amount must be a number", amount) from None
    raise InvalidAmount("Amount must be a number", amount)


def _decimal_places(value: Decimal) -> int:
    # normalize() bağlamın Emax sınırına takılır; basamaklar doğrudan okunur
    _, digits, exponent = value.as_tuple()
    significant = "".join(map(str, digits)).rstrip("0")
    trailing_zeros = len(digits) - len(significant)
    return max(0, -(exponent + trailing_zeros))


def validate_amount(amount) -> None:
    """Tutar pozitif, sonlu ve en fazla 2 ondalık basamaklı olmalı (10.50 geçerli, 10.555 değil)."""
    value = _to_decimal(amount)
    if not value.is_finite():
        raise InvalidAmount("Amount must be a finite number", amount)
    if value <= 0:
        raise InvalidAmount("Amount must be greater than 0", amount)
    if _decimal_places(value) > MAX_AMOUNT_DECIMALS:
        raise InvalidAmount(
            f"Amount cannot have more than {MAX_AMOUNT_DECIMALS} decimal places", amount
        )


def validate_installments(installments: int) -> None:
    if (
        isinstance(installments, bool)
        or not isinstance(installments, int)
        or installments not in VALID_INSTALLMENTS
    ):
        raise InvalidInstallmentCount(
            f"Invalid installment count: {installments}. Valid values are 1-12",
            installments,
        )


def validate_identity_number(identity: str) -> None:
    """
    TC Kimlik No: 11 hane, ilk hane 0 olamaz.
    10. hane = ((1+3+5+7+9. haneler) * 7 - (2+4+6+8. haneler)) mod 10
    11. hane = (ilk 10 hanenin toplamı) mod 10
    """
    if not isinstance(identity, str):
        raise InvalidIdentityNumber("Identity number must be a string", identity)
    raw = identity.strip()
    if len(raw) != 11:
        raise InvalidIdentityNumber("Identity number must be 11 digits", identity)
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidIdentityNumber("Identity number must contain only digits", identity)

    digits = [int(c) for c in raw]
    if digits[0] == 0:
        raise InvalidIdentityNumber("Identity number cannot start with 0", identity)

    odd_sum = sum(digits[0:9:2])
    even_sum = sum(digits[1:8:2])
    if (odd_sum * 7 - even_sum) % 10 != digits[9]:
        raise InvalidIdentityNumber("Invalid identity number checksum", identity)
    if sum(digits[:10]) % 10 != digits[10]:
        raise InvalidIdentityNumber("Invalid identity number checksum", identity)
