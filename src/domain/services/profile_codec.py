"""Canonical text encoding of profiles.

The encoding is compact JSON with a fixed key order::

    {"v":1,"name":{"firstName":"Jane","lastName":"Doe"},"email":"jane@doe.com",
     "phoneNumber":"555-1234","socialNetworks":{"discordTag":null,
     "instagramUsername":null},"notes":""}

Absent optional handles are an explicit ``null`` so that "not shared" and
"shared as an empty string" survive the round trip. The blob is
self-describing (``v`` is the format version) because the scannable image is
the only channel it travels through.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from core.exceptions import (
    InvalidFieldError,
    InvalidPayloadFieldError,
    MalformedPayloadError,
)
from domain.entities.profile import (
    DiscordTag,
    Email,
    Name,
    PhoneNumber,
    ProfileRecord,
    SocialNetworks,
)

FORMAT_VERSION = 1


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)


class _NamePayload(_WireModel):
    firstName: str
    lastName: str


class _SocialNetworksPayload(_WireModel):
    discordTag: str | None
    instagramUsername: str | None


class _ProfilePayload(_WireModel):
    v: Literal[1]
    name: _NamePayload
    email: str
    phoneNumber: str
    socialNetworks: _SocialNetworksPayload
    notes: str

    @field_validator("v", mode="before")
    @classmethod
    def integer_version(cls, value: object) -> object:
        # bool is an int subclass and 1.0 == 1, both would match Literal[1]
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError("format version must be an integer")
        return value


def _describe(exc: ValidationError) -> str:
    error = exc.errors(include_url=False)[0]
    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {error['msg']}" if location else error["msg"]


class ProfileCodec:
    """Converts profiles to and from the canonical text encoding."""

    def encode(self, record: ProfileRecord) -> str:
        """Serialize a profile. Never fails for a constructed record."""
        # The record already passed validation; build the wire model as-is.
        socials = record.social_networks
        payload = _ProfilePayload.model_construct(
            v=FORMAT_VERSION,
            name=_NamePayload.model_construct(
                firstName=str(record.name.first_name),
                lastName=str(record.name.last_name),
            ),
            email=str(record.email.value),
            phoneNumber=str(record.phone_number.value),
            socialNetworks=_SocialNetworksPayload.model_construct(
                discordTag=str(socials.discord_tag.value) if socials.discord_tag else None,
                instagramUsername=(
                    str(socials.instagram_username)
                    if socials.instagram_username is not None
                    else None
                ),
            ),
            notes=str(record.notes),
        )
        return payload.model_dump_json()

    def decode(self, text: str | bytes) -> ProfileRecord:
        """Parse scanned text into a profile.

        Raises:
            MalformedPayloadError: text is not the canonical encoding.
            InvalidPayloadFieldError: the encoding is well-formed but a value
                breaks a profile invariant.
        """
        raw = self._to_bytes(text)
        if not raw.strip():
            raise MalformedPayloadError("empty payload")

        try:
            payload = _ProfilePayload.model_validate_json(raw)
        except ValidationError as e:
            raise MalformedPayloadError(_describe(e)) from e
        except ValueError as e:
            raise MalformedPayloadError(str(e)) from e

        try:
            return self._to_record(payload)
        except InvalidFieldError as e:
            raise InvalidPayloadFieldError(e.field, e.reason) from e

    @staticmethod
    def _to_bytes(text: object) -> bytes:
        if isinstance(text, bytes):
            try:
                text.decode("utf-8")
            except UnicodeDecodeError as e:
                raise MalformedPayloadError("payload is not UTF-8") from e
            return text
        if isinstance(text, str):
            try:
                return text.encode("utf-8")
            except UnicodeEncodeError as e:
                raise MalformedPayloadError("payload is not valid Unicode text") from e
        raise MalformedPayloadError("payload must be text")

    @staticmethod
    def _to_record(payload: _ProfilePayload) -> ProfileRecord:
        socials = payload.socialNetworks
        return ProfileRecord(
            name=Name(
                first_name=payload.name.firstName,
                last_name=payload.name.lastName,
            ),
            email=Email(payload.email),
            phone_number=PhoneNumber(payload.phoneNumber),
            social_networks=SocialNetworks(
                discord_tag=(
                    DiscordTag(socials.discordTag) if socials.discordTag is not None else None
                ),
                instagram_username=socials.instagramUsername,
            ),
            notes=payload.notes,
        )
