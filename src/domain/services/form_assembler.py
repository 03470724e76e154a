"""Builds profiles from user-entered form fields."""

from collections.abc import Mapping

import structlog

from core.exceptions import MissingFieldError
from domain.entities.profile import (
    DiscordTag,
    Email,
    Name,
    PhoneNumber,
    ProfileField,
    ProfileRecord,
    SocialNetworks,
)

logger = structlog.get_logger()

REQUIRED_FIELDS: tuple[ProfileField, ...] = (
    ProfileField.FIRST_NAME,
    ProfileField.LAST_NAME,
    ProfileField.EMAIL,
    ProfileField.PHONE_NUMBER,
)

FormFields = Mapping[ProfileField | str, str | None]


class FormAssembler:
    """Turns a field-id -> text mapping into a validated profile.

    Keys are canonical field ids (``ProfileField`` members or their string
    values). Unknown keys are ignored.
    """

    def assemble(self, fields: FormFields) -> ProfileRecord:
        """Build a profile from form input.

        Raises:
            MissingFieldError: the first required field (in canonical order)
                that is absent or blank.
            InvalidFieldError: a present value breaks a profile invariant.
        """
        values = self._normalize(fields)

        for required in REQUIRED_FIELDS:
            if not values.get(required):
                raise MissingFieldError(required)

        discord_tag = values.get(ProfileField.DISCORD_TAG)
        notes = fields.get(ProfileField.NOTES)

        return ProfileRecord(
            name=Name(
                first_name=values[ProfileField.FIRST_NAME],
                last_name=values[ProfileField.LAST_NAME],
            ),
            email=Email(values[ProfileField.EMAIL]),
            phone_number=PhoneNumber(values[ProfileField.PHONE_NUMBER]),
            social_networks=SocialNetworks(
                discord_tag=DiscordTag(discord_tag) if discord_tag else None,
                instagram_username=values.get(ProfileField.INSTAGRAM_USERNAME) or None,
            ),
            notes=notes or "",
        )

    def fields_from_record(self, record: ProfileRecord) -> dict[ProfileField, str]:
        """Prefill a form from an existing profile."""
        socials = record.social_networks
        fields = {
            ProfileField.FIRST_NAME: record.name.first_name,
            ProfileField.LAST_NAME: record.name.last_name,
            ProfileField.EMAIL: record.email.value,
            ProfileField.PHONE_NUMBER: record.phone_number.value,
            ProfileField.NOTES: record.notes,
        }
        if socials.discord_tag is not None:
            fields[ProfileField.DISCORD_TAG] = socials.discord_tag.value
        if socials.instagram_username is not None:
            fields[ProfileField.INSTAGRAM_USERNAME] = socials.instagram_username
        return fields

    @staticmethod
    def _normalize(fields: FormFields) -> dict[ProfileField, str]:
        """Trimmed text per known field; notes are kept verbatim elsewhere."""
        values: dict[ProfileField, str] = {}
        for key, text in fields.items():
            try:
                profile_field = ProfileField(key)
            except ValueError:
                logger.debug("form_field_ignored", field=str(key))
                continue
            if profile_field is ProfileField.NOTES or text is None:
                continue
            values[profile_field] = text.strip() if isinstance(text, str) else text
        return values
