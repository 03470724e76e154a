"""Pydantic schemas for Profile API."""

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.profile import ProfileRecord


class ProfileForm(BaseModel):
    """Schema for creating or replacing the own profile.

    Keys are canonical field ids: ``firstName``, ``lastName``, ``email``,
    ``phoneNumber``, ``discordTag``, ``instagramUsername``, ``notes``.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "fields": {
                    "firstName": "Jane",
                    "lastName": "Doe",
                    "email": "jane@doe.com",
                    "phoneNumber": "555-1234",
                    "discordTag": "jane#1234",
                }
            }
        },
    )

    fields: dict[str, str | None] = Field(default_factory=dict)


class NameResponse(BaseModel):
    first_name: str
    last_name: str


class SocialNetworksResponse(BaseModel):
    discord_tag: str | None = None
    instagram_username: str | None = None


class ProfileEntryResponse(BaseModel):
    """One tap-to-copy entry of a profile."""

    field: str
    value: str


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    name: NameResponse
    display_name: str
    email: str
    phone_number: str
    social_networks: SocialNetworksResponse
    notes: str
    entries: list[ProfileEntryResponse]

    @classmethod
    def from_entity(cls, record: ProfileRecord) -> "ProfileResponse":
        socials = record.social_networks
        return cls(
            name=NameResponse(
                first_name=record.name.first_name,
                last_name=record.name.last_name,
            ),
            display_name=str(record.name),
            email=str(record.email),
            phone_number=str(record.phone_number),
            social_networks=SocialNetworksResponse(
                discord_tag=str(socials.discord_tag) if socials.discord_tag else None,
                instagram_username=socials.instagram_username,
            ),
            notes=record.notes,
            entries=[
                ProfileEntryResponse(field=field.value, value=value)
                for field, value in record.copyable_entries()
            ],
        )


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse


class PayloadResponse(BaseModel):
    """Canonical text embedded in a profile code."""

    payload: str


class PayloadDetailResponse(BaseModel):
    data: PayloadResponse


class ProfileFormResponse(BaseModel):
    """Own profile as form fields keyed by canonical field id."""

    fields: dict[str, str]


class ProfileFormDetailResponse(BaseModel):
    data: ProfileFormResponse
