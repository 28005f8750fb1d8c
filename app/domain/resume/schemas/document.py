"""이력서 문서 스키마.

편집 세션이 보관하는 문서 전체와 식별 컬렉션 항목 모델.
식별 컬렉션 항목은 `id`(식별 토큰)를 가지며, `id`가 없으면 아직 식별 토큰이
부여되지 않은 새 항목을 뜻한다.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

IDENTIFIED_COLLECTIONS = ("experience", "education", "websites", "projects", "custom_sections")
SCALAR_COLLECTIONS = ("skills", "achievements", "hobbies")

ID_DESCRIPTION = "Unique identifier. Preserve it exactly if present; omit it on new items."


class CamelModel(BaseModel):
    """camelCase 직렬화 공통 베이스"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ExperienceEntry(CamelModel):
    """경력 항목"""

    id: str | None = Field(default=None, description=ID_DESCRIPTION)
    title: str = Field(default="", description="The job title.")
    company: str = Field(default="", description="The company name.")
    location: str = Field(default="", description="The job location.")
    dates: str = Field(default="", description="The dates of employment.")
    responsibilities: list[str] = Field(
        default_factory=list, description="A list of responsibilities or achievements."
    )


class EducationEntry(CamelModel):
    """학력 항목"""

    id: str | None = Field(default=None, description=ID_DESCRIPTION)
    degree: str = Field(default="", description="The degree or certification obtained.")
    school: str = Field(default="", description="The name of the school or institution.")
    location: str = Field(default="", description="The location of the school.")
    dates: str = Field(default="", description="The dates of attendance.")


class WebsiteEntry(CamelModel):
    """웹사이트/프로필 항목"""

    id: str | None = Field(default=None, description=ID_DESCRIPTION)
    name: str = Field(default="", description="The name of the website (e.g., LinkedIn, GitHub).")
    url: str = Field(default="", description="The URL.")


class ProjectEntry(CamelModel):
    """프로젝트 항목"""

    id: str | None = Field(default=None, description=ID_DESCRIPTION)
    name: str = Field(default="", description="The project name.")
    description: str = Field(default="", description="A short description of the project.")
    technologies: list[str] = Field(
        default_factory=list, description="A list of technologies used in the project."
    )
    url: str | None = Field(default=None, description="The URL for the project.")


class CustomSection(CamelModel):
    """사용자 정의 섹션 (자격증, 언어 등)"""

    id: str | None = Field(default=None, description=ID_DESCRIPTION)
    title: str = Field(default="", description="The title of the custom section.")
    content: str = Field(default="", description="Paragraph or list content of the section.")


class Resume(CamelModel):
    """이력서 문서 전체"""

    first_name: str = Field(default="", description="The first name of the person.")
    last_name: str = Field(default="", description="The last name of the person.")
    profile_picture_url: str | None = Field(default=None, description="URL to a profile picture.")
    profession: str | None = Field(default=None, description="The professional title or role.")
    email: str = Field(default="", description="The email address.")
    phone: str = Field(default="", description="The phone number.")
    location: str | None = Field(default=None, description="The city and country of residence.")
    pin_code: str | None = Field(default=None, description="The postal or ZIP code.")
    linked_in: str | None = Field(default=None, description="URL to a LinkedIn profile.")
    driving_license: str | None = Field(default=None, description="Driving license details.")
    summary: str = Field(default="", description="A professional summary.")

    experience: list[ExperienceEntry] = Field(
        default_factory=list, description="The work experience section."
    )
    education: list[EducationEntry] = Field(
        default_factory=list, description="The education section."
    )
    websites: list[WebsiteEntry] = Field(
        default_factory=list, description="Relevant websites or professional profiles."
    )
    projects: list[ProjectEntry] = Field(
        default_factory=list, description="Personal or professional projects."
    )
    custom_sections: list[CustomSection] = Field(
        default_factory=list,
        description="Custom user-defined sections, like 'Certifications' or 'Languages'.",
    )

    skills: list[str] = Field(default_factory=list, description="A list of relevant skills.")
    achievements: list[str] = Field(
        default_factory=list, description="Achievements, awards, or honors."
    )
    hobbies: list[str] = Field(default_factory=list, description="Hobbies and interests.")

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


ENTRY_MODELS: dict[str, type[CamelModel]] = {
    "experience": ExperienceEntry,
    "education": EducationEntry,
    "websites": WebsiteEntry,
    "projects": ProjectEntry,
    "custom_sections": CustomSection,
}
