"""Reference data schemas: password policy, timezones, states, switch keys."""

from typing import Optional

from pydantic import Field, field_validator

from akamai_iam.schemas.common import IAMModel, NonBlankStr


class PasswordPolicy(IAMModel):
    case_dif: int = Field(0, alias="caseDif")
    max_repeating: int = Field(0, alias="maxRepeating")
    min_digits: int = Field(0, alias="minDigits")
    min_length: int = Field(0, alias="minLength")
    min_letters: int = Field(0, alias="minLetters")
    min_non_alpha: int = Field(0, alias="minNonAlpha")
    min_reuse: int = Field(0, alias="minReuse")
    pw_class: str = Field("", alias="pwclass")
    rotate_frequency: int = Field(0, alias="rotateFrequency")


class Timezone(IAMModel):
    timezone: str = ""
    description: str = ""
    offset: str = ""
    posix: str = ""


class TimeoutPolicy(IAMModel):
    name: str = ""
    value: int = 0


class AccountSwitchKey(IAMModel):
    account_name: str = Field("", alias="accountName")
    account_switch_key: str = Field("", alias="accountSwitchKey")


class ListStatesRequest(IAMModel):
    country: NonBlankStr


class ListAccountSwitchKeysRequest(IAMModel):
    """Switch keys of ``client_id`` (the caller's own client when unset)."""

    client_id: Optional[str] = None
    search: Optional[str] = None

    @field_validator("client_id", "search")
    @classmethod
    def blank_is_absent(cls, v: Optional[str]) -> Optional[str]:
        return v or None


__all__ = [
    "AccountSwitchKey",
    "ListAccountSwitchKeysRequest",
    "ListStatesRequest",
    "PasswordPolicy",
    "TimeoutPolicy",
    "Timezone",
]
