"""User-identifying data attached to a pixel event."""

from dataclasses import dataclass

from .formatting import describe, value_equals, value_hash


@dataclass(eq=False)
class UserData:
    """
    Signals that identify the user behind an event.

    Values are passed through as given. Callers are responsible for
    normalizing and hashing personal fields before they are set.
    """

    email: str | None = None
    phone: str | None = None
    gender: str | None = None
    date_of_birth: str | None = None  # YYYYMMDD
    last_name: str | None = None
    first_name: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country_code: str | None = None  # ISO 3166-1 alpha-2
    external_id: str | None = None
    client_ip_address: str | None = None
    client_user_agent: str | None = None
    fbc: str | None = None  # click ID cookie
    fbp: str | None = None  # browser ID cookie
    subscription_id: str | None = None
    fb_login_id: str | None = None
    lead_id: str | None = None

    def set_email(self, email: str | None) -> "UserData":
        self.email = email
        return self

    def set_phone(self, phone: str | None) -> "UserData":
        self.phone = phone
        return self

    def set_gender(self, gender: str | None) -> "UserData":
        self.gender = gender
        return self

    def set_date_of_birth(self, date_of_birth: str | None) -> "UserData":
        self.date_of_birth = date_of_birth
        return self

    def set_last_name(self, last_name: str | None) -> "UserData":
        self.last_name = last_name
        return self

    def set_first_name(self, first_name: str | None) -> "UserData":
        self.first_name = first_name
        return self

    def set_city(self, city: str | None) -> "UserData":
        self.city = city
        return self

    def set_state(self, state: str | None) -> "UserData":
        self.state = state
        return self

    def set_zip_code(self, zip_code: str | None) -> "UserData":
        self.zip_code = zip_code
        return self

    def set_country_code(self, country_code: str | None) -> "UserData":
        self.country_code = country_code
        return self

    def set_external_id(self, external_id: str | None) -> "UserData":
        self.external_id = external_id
        return self

    def set_client_ip_address(self, client_ip_address: str | None) -> "UserData":
        self.client_ip_address = client_ip_address
        return self

    def set_client_user_agent(self, client_user_agent: str | None) -> "UserData":
        self.client_user_agent = client_user_agent
        return self

    def set_fbc(self, fbc: str | None) -> "UserData":
        self.fbc = fbc
        return self

    def set_fbp(self, fbp: str | None) -> "UserData":
        self.fbp = fbp
        return self

    def set_subscription_id(self, subscription_id: str | None) -> "UserData":
        self.subscription_id = subscription_id
        return self

    def set_fb_login_id(self, fb_login_id: str | None) -> "UserData":
        self.fb_login_id = fb_login_id
        return self

    def set_lead_id(self, lead_id: str | None) -> "UserData":
        self.lead_id = lead_id
        return self

    def __eq__(self, other: object) -> bool:
        return value_equals(self, other)

    def __hash__(self) -> int:
        return value_hash(self)

    def __str__(self) -> str:
        return describe(self)
