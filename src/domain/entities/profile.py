"""Profile domain entity and its value objects."""

from dataclasses import dataclass, field
from enum import StrEnum

from core.exceptions import InvalidFieldError


class ProfileField(StrEnum):
    """Canonical field identifiers, in canonical order.

    These are the keys used by the form assembler and the payload encoding.
    Display labels are the UI's business and never appear here.
    """

    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    EMAIL = "email"
    PHONE_NUMBER = "phoneNumber"
    DISCORD_TAG = "discordTag"
    INSTAGRAM_USERNAME = "instagramUsername"
    NOTES = "notes"


def _check_text(value: object, profile_field: ProfileField) -> str:
    if not isinstance(value, str):
        raise InvalidFieldError(profile_field, "must be text")
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidFieldError(profile_field, "must be valid Unicode text") from None
    return value


def _require_text(value: object, profile_field: ProfileField) -> str:
    text = _check_text(value, profile_field)
    if not text.strip():
        raise InvalidFieldError(profile_field, "must not be empty")
    return text


@dataclass(frozen=True, slots=True)
class Name:
    """A person's first and last name."""

    first_name: str
    last_name: str

    def __post_init__(self) -> None:
        _require_text(self.first_name, ProfileField.FIRST_NAME)
        _require_text(self.last_name, ProfileField.LAST_NAME)

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True, slots=True)
class Email:
    """Email address: one ``@``, text on both sides, no whitespace."""

    value: str

    def __post_init__(self) -> None:
        _require_text(self.value, ProfileField.EMAIL)
        local, sep, domain = self.value.partition("@")
        if not sep or "@" in domain:
            raise InvalidFieldError(ProfileField.EMAIL, "must contain exactly one '@'")
        if not local or not domain:
            raise InvalidFieldError(
                ProfileField.EMAIL, "must have text on both sides of '@'"
            )
        if any(ch.isspace() for ch in self.value):
            raise InvalidFieldError(ProfileField.EMAIL, "must not contain whitespace")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class PhoneNumber:
    """Free-form phone number, kept verbatim."""

    value: str

    def __post_init__(self) -> None:
        _require_text(self.value, ProfileField.PHONE_NUMBER)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class DiscordTag:
    value: str

    def __post_init__(self) -> None:
        _require_text(self.value, ProfileField.DISCORD_TAG)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class SocialNetworks:
    """Optional social handles. ``None`` means the handle is not shared."""

    discord_tag: DiscordTag | None = None
    instagram_username: str | None = None

    def __post_init__(self) -> None:
        if self.discord_tag is not None and not isinstance(self.discord_tag, DiscordTag):
            raise InvalidFieldError(ProfileField.DISCORD_TAG, "must be a DiscordTag")
        if self.instagram_username is not None:
            _check_text(self.instagram_username, ProfileField.INSTAGRAM_USERNAME)


@dataclass(frozen=True, slots=True)
class ProfileRecord:
    """Domain entity for a contact profile.

    Construction is the only validation gate: an instance that exists is
    valid. Instances are immutable; use ``dataclasses.replace`` to derive an
    edited copy, which validates again.
    """

    name: Name
    email: Email
    phone_number: PhoneNumber
    social_networks: SocialNetworks = field(default_factory=SocialNetworks)
    notes: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.name, Name):
            raise InvalidFieldError(ProfileField.FIRST_NAME, "must be a Name")
        if not isinstance(self.email, Email):
            raise InvalidFieldError(ProfileField.EMAIL, "must be an Email")
        if not isinstance(self.phone_number, PhoneNumber):
            raise InvalidFieldError(ProfileField.PHONE_NUMBER, "must be a PhoneNumber")
        if not isinstance(self.social_networks, SocialNetworks):
            raise InvalidFieldError(ProfileField.DISCORD_TAG, "must be SocialNetworks")
        _check_text(self.notes, ProfileField.NOTES)

    def copyable_entries(self) -> list[tuple[ProfileField, str]]:
        """Fields a viewer shows as tap-to-copy cards, in display order."""
        entries: list[tuple[ProfileField, str]] = [
            (ProfileField.FIRST_NAME, self.name.first_name),
            (ProfileField.LAST_NAME, self.name.last_name),
            (ProfileField.EMAIL, str(self.email)),
            (ProfileField.PHONE_NUMBER, str(self.phone_number)),
        ]
        socials = self.social_networks
        if socials.discord_tag is not None:
            entries.append((ProfileField.DISCORD_TAG, str(socials.discord_tag)))
        if socials.instagram_username is not None:
            entries.append((ProfileField.INSTAGRAM_USERNAME, socials.instagram_username))
        if self.notes:
            entries.append((ProfileField.NOTES, self.notes))
        return entries
