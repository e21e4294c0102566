from .common import TapsilatModel


class Buyer(TapsilatModel):
    id: str | None = None
    name: str
    surname: str
    email: str | None = None
    gsm_number: str | None = None
    identity_number: str | None = None
    last_login_date: str | None = None
    registration_date: str | None = None
    registration_address: str | None = None
    ip: str | None = None
    city: str | None = None
    country: str | None = None
    zip_code: str | None = None


class CreateBuyerRequest(TapsilatModel):
    """Sipariş oluştururken alıcı. gsm_number gönderimden önce 90XXXXXXXXXX biçimine çevrilir."""
    name: str
    surname: str
    email: str | None = None
    gsm_number: str | None = None
    identity_number: str | None = None
    registration_address: str | None = None
    ip: str | None = None
    city: str | None = None
    country: str | None = None
    zip_code: str | None = None
